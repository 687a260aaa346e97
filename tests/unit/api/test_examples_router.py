import deepl
from fastapi.testclient import TestClient

from api.app import app
from api.routers.examples import get_pipeline, get_translator
from core.versions import APP_VERSION, CACHE_VERSION
from domain.examples.schemas.schema import ExampleSentence


class FakePipeline:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def get_example_sentence(self, word, target_language_code, translate, category=None):
        self.calls.append((word, target_language_code, category))
        if self.error:
            raise self.error
        return self.result


def _client(pipeline) -> TestClient:
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    app.dependency_overrides[get_translator] = lambda: object()
    return TestClient(app)


def teardown_function():
    app.dependency_overrides.clear()


def test_get_example():
    pipeline = FakePipeline(
        result=ExampleSentence(english="The cat slept.", translated="Kot spał.", source="Tatoeba")
    )
    res = _client(pipeline).get("/examples/cat", params={"target_lang": "pl", "category": "animal"})

    assert res.status_code == 200
    assert res.json() == {"english": "The cat slept.", "translated": "Kot spał.", "source": "Tatoeba"}
    assert pipeline.calls == [("cat", "pl", "animal")]


def test_invalid_input_is_400():
    res = _client(FakePipeline(error=ValueError("Word must not be empty"))).get(
        "/examples/%20", params={"target_lang": "pl"}
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Word must not be empty"


def test_translation_failure_is_502():
    res = _client(FakePipeline(error=deepl.DeepLException("quota exceeded"))).get(
        "/examples/cat", params={"target_lang": "pl"}
    )
    assert res.status_code == 502


def test_target_lang_is_required():
    res = _client(FakePipeline()).get("/examples/cat")
    assert res.status_code == 422


def test_health():
    res = _client(FakePipeline()).get("/health")
    body = res.json()

    assert res.status_code == 200
    assert body["app_version"] == APP_VERSION
    assert body["cache_version"] == CACHE_VERSION
