from typing import Any, List
from urllib.parse import quote

from common.config import WORDS_API_KEY, is_credential_set
from common.constants import PAID_PROVIDER_TIMEOUT, PROVIDER_WORDS_API
from domain.examples.providers.provider import ExampleProvider, ProviderRequest
from domain.examples.providers.shapes import WordsApiResponse


class WordsApiProvider(ExampleProvider):
    name = PROVIDER_WORDS_API
    timeout = PAID_PROVIDER_TIMEOUT
    host = "wordsapiv1.p.rapidapi.com"

    def __init__(self, api_key: str | None = WORDS_API_KEY):
        self.api_key = api_key

    def is_configured(self) -> bool:
        return is_credential_set(self.api_key)

    def build_request(self, term: str) -> ProviderRequest:
        return ProviderRequest(
            url=f"https://{self.host}/words/{quote(term)}/examples",
            headers={
                "Accept": "application/json",
                "X-RapidAPI-Key": self.api_key or "",
                "X-RapidAPI-Host": self.host,
            },
        )

    def parse(self, payload: Any) -> List[str]:
        return [ex for ex in WordsApiResponse.model_validate(payload).examples if ex]
