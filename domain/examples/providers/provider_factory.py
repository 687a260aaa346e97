from typing import List

from domain.examples.providers.free_dictionary_provider import FreeDictionaryProvider
from domain.examples.providers.oxford_provider import OxfordProvider
from domain.examples.providers.provider import ExampleProvider
from domain.examples.providers.tatoeba_provider import TatoebaProvider
from domain.examples.providers.words_api_provider import WordsApiProvider
from domain.examples.providers.wordnik_provider import WordnikProvider


class ProviderFactory:
    @staticmethod
    def create_provider(name: str) -> ExampleProvider:
        if name == "oxford":
            return OxfordProvider()
        elif name == "wordsapi":
            return WordsApiProvider()
        elif name == "tatoeba":
            return TatoebaProvider()
        elif name == "freedictionary":
            return FreeDictionaryProvider()
        elif name == "wordnik":
            return WordnikProvider()
        else:
            raise ValueError(f"Unsupported provider: {name}")

    @staticmethod
    def create_default_providers() -> List[ExampleProvider]:
        """
        All providers in priority order, paid first.
        Unconfigured ones are kept; the retriever skips them.
        """
        return [
            ProviderFactory.create_provider(name)
            for name in ("oxford", "wordsapi", "tatoeba", "freedictionary", "wordnik")
        ]
