from typing import Any, List
from urllib.parse import quote

from common.config import OXFORD_APP_ID, OXFORD_APP_KEY, is_credential_set
from common.constants import PAID_PROVIDER_TIMEOUT, PROVIDER_OXFORD
from domain.examples.providers.provider import ExampleProvider, ProviderRequest
from domain.examples.providers.shapes import OxfordResponse, OxfordSense


class OxfordProvider(ExampleProvider):
    name = PROVIDER_OXFORD
    timeout = PAID_PROVIDER_TIMEOUT
    base_url = "https://od-api.oxforddictionaries.com/api/v2/entries/en-gb"

    def __init__(self, app_id: str | None = OXFORD_APP_ID, app_key: str | None = OXFORD_APP_KEY):
        self.app_id = app_id
        self.app_key = app_key

    def is_configured(self) -> bool:
        return is_credential_set(self.app_id) and is_credential_set(self.app_key)

    def build_request(self, term: str) -> ProviderRequest:
        return ProviderRequest(
            url=f"{self.base_url}/{quote(term.lower())}",
            headers={
                "Accept": "application/json",
                "app_id": self.app_id or "",
                "app_key": self.app_key or "",
            },
        )

    def _sense_examples(self, sense: OxfordSense) -> List[str]:
        out = [ex.text for ex in sense.examples if ex.text]
        for subsense in sense.subsenses:
            out.extend(self._sense_examples(subsense))
        return out

    def parse(self, payload: Any) -> List[str]:
        response = OxfordResponse.model_validate(payload)
        examples = []
        for result in response.results:
            for lexical_entry in result.lexical_entries:
                for entry in lexical_entry.entries:
                    for sense in entry.senses:
                        examples.extend(self._sense_examples(sense))
        return examples
