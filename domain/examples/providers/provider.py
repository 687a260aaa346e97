from abc import ABC, abstractmethod
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from common.constants import FREE_PROVIDER_TIMEOUT


class ProviderRequest(BaseModel):
    url: str
    params: Dict[str, Any] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)


class ExampleProvider(ABC):
    """
    One external example-sentence service.
    The retriever owns transport, caching and throttling; an adapter only
    knows how to ask and how to read the answer.
    """

    name: str
    timeout: float = FREE_PROVIDER_TIMEOUT

    def is_configured(self) -> bool:
        return True

    @abstractmethod
    def build_request(self, term: str) -> ProviderRequest:
        """
        Build the HTTP GET request for a search term.
        """
        raise NotImplementedError

    @abstractmethod
    def parse(self, payload: Any) -> List[str]:
        """
        Extract raw example strings from a decoded JSON payload.
        Raises pydantic.ValidationError on a payload of the wrong shape.
        """
        raise NotImplementedError
