import pytest
from pydantic import ValidationError

from common.constants import PAID_PROVIDER_TIMEOUT
from domain.examples.providers.free_dictionary_provider import FreeDictionaryProvider
from domain.examples.providers.oxford_provider import OxfordProvider
from domain.examples.providers.provider_factory import ProviderFactory
from domain.examples.providers.tatoeba_provider import TatoebaProvider
from domain.examples.providers.words_api_provider import WordsApiProvider
from domain.examples.providers.wordnik_provider import WordnikProvider


def test_oxford_parses_nested_senses():
    payload = {
        "results": [
            {
                "lexicalEntries": [
                    {
                        "entries": [
                            {
                                "senses": [
                                    {
                                        "examples": [{"text": "the cat purred"}],
                                        "subsenses": [{"examples": [{"text": "a cat nap"}]}],
                                    }
                                ]
                            }
                        ]
                    }
                ]
            }
        ]
    }
    assert OxfordProvider("id", "key").parse(payload) == ["the cat purred", "a cat nap"]


def test_oxford_request_and_configuration():
    provider = OxfordProvider("id", "key")
    req = provider.build_request("Teddy Bear")

    assert req.url.endswith("/entries/en-gb/teddy%20bear")
    assert req.headers["app_id"] == "id"
    assert req.headers["app_key"] == "key"
    assert provider.timeout == PAID_PROVIDER_TIMEOUT
    assert provider.is_configured()
    assert not OxfordProvider("your-oxford-app-id", "key").is_configured()
    assert not OxfordProvider(None, None).is_configured()


def test_words_api():
    provider = WordsApiProvider("secret")
    req = provider.build_request("cat")

    assert req.url == "https://wordsapiv1.p.rapidapi.com/words/cat/examples"
    assert req.headers["X-RapidAPI-Key"] == "secret"
    assert provider.parse({"examples": ["The cat sat.", ""]}) == ["The cat sat."]
    assert not WordsApiProvider("your-words-api-key").is_configured()


def test_tatoeba_keeps_english_only():
    provider = TatoebaProvider()
    req = provider.build_request("cat")
    payload = {
        "results": [
            {"text": "The cat sleeps.", "lang": "eng"},
            {"text": "Le chat dort.", "lang": "fra"},
            {"text": None, "lang": "eng"},
        ]
    }

    assert req.params["query"] == "cat"
    assert req.params["from"] == "eng"
    assert provider.is_configured()
    assert provider.parse(payload) == ["The cat sleeps."]


def test_free_dictionary():
    payload = [
        {
            "word": "cat",
            "meanings": [
                {"definitions": [{"definition": "an animal", "example": "The cat purred."}]},
                {"definitions": [{"definition": "no example"}]},
            ],
        }
    ]
    provider = FreeDictionaryProvider()
    assert provider.parse(payload) == ["The cat purred."]
    assert provider.build_request("cat").url == "https://api.dictionaryapi.dev/api/v2/entries/en/cat"


def test_wordnik():
    provider = WordnikProvider("k")
    req = provider.build_request("cat")

    assert req.params["api_key"] == "k"
    assert provider.parse({"examples": [{"text": "A cat."}, {"title": "x"}]}) == ["A cat."]
    assert not WordnikProvider("").is_configured()


def test_malformed_payload_raises_validation_error():
    with pytest.raises(ValidationError):
        FreeDictionaryProvider().parse({"title": "No Definitions Found"})
    with pytest.raises(ValidationError):
        WordsApiProvider("k").parse({"examples": "oops"})


def test_factory():
    names = [p.name for p in ProviderFactory.create_default_providers()]
    assert names == ["Oxford", "WordsAPI", "Tatoeba", "FreeDictionary", "Wordnik"]
    assert isinstance(ProviderFactory.create_provider("tatoeba"), TatoebaProvider)
    with pytest.raises(ValueError, match="Unsupported provider"):
        ProviderFactory.create_provider("datamuse")
