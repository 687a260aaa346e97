from typing import Any, List
from urllib.parse import quote

from common.constants import PROVIDER_FREE_DICTIONARY
from domain.examples.providers.provider import ExampleProvider, ProviderRequest
from domain.examples.providers.shapes import FreeDictionaryResponse


class FreeDictionaryProvider(ExampleProvider):
    name = PROVIDER_FREE_DICTIONARY
    base_url = "https://api.dictionaryapi.dev/api/v2/entries/en"

    def build_request(self, term: str) -> ProviderRequest:
        return ProviderRequest(
            url=f"{self.base_url}/{quote(term)}",
            headers={"Accept": "application/json"},
        )

    def parse(self, payload: Any) -> List[str]:
        entries = FreeDictionaryResponse.model_validate(payload).root
        return [
            definition.example
            for entry in entries
            for meaning in entry.meanings
            for definition in meaning.definitions
            if definition.example
        ]
