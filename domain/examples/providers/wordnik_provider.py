from typing import Any, List
from urllib.parse import quote

from common.config import WORDNIK_API_KEY, is_credential_set
from common.constants import PROVIDER_WORDNIK
from domain.examples.providers.provider import ExampleProvider, ProviderRequest
from domain.examples.providers.shapes import WordnikResponse


class WordnikProvider(ExampleProvider):
    name = PROVIDER_WORDNIK
    base_url = "https://api.wordnik.com/v4/word.json"

    def __init__(self, api_key: str | None = WORDNIK_API_KEY):
        self.api_key = api_key

    def is_configured(self) -> bool:
        return is_credential_set(self.api_key)

    def build_request(self, term: str) -> ProviderRequest:
        return ProviderRequest(
            url=f"{self.base_url}/{quote(term)}/examples",
            params={"limit": 10, "useCanonical": "true", "api_key": self.api_key or ""},
            headers={"Accept": "application/json"},
        )

    def parse(self, payload: Any) -> List[str]:
        return [ex.text for ex in WordnikResponse.model_validate(payload).examples if ex.text]
