from typing import Any, List

from common.constants import PROVIDER_TATOEBA
from domain.examples.providers.provider import ExampleProvider, ProviderRequest
from domain.examples.providers.shapes import TatoebaResponse


class TatoebaProvider(ExampleProvider):
    name = PROVIDER_TATOEBA
    url = "https://tatoeba.org/en/api_v0/search"

    def build_request(self, term: str) -> ProviderRequest:
        return ProviderRequest(
            url=self.url,
            params={"from": "eng", "query": term, "sort": "relevance", "limit": 20},
            headers={"Accept": "application/json"},
        )

    def parse(self, payload: Any) -> List[str]:
        response = TatoebaResponse.model_validate(payload)
        return [s.text for s in response.results if s.text and s.lang == "eng"]
