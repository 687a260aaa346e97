import asyncio
from typing import Any, List

import httpx

from domain.examples.example_cache import ExampleCache, RateLimiter
from domain.examples.providers.provider import ExampleProvider, ProviderRequest
from domain.examples.providers.shapes import WordsApiResponse
from domain.examples.retriever import ExampleRetriever, build_search_terms, deduplicate
from domain.examples.schemas.schema import CandidateExample
from infra.memory.memory_store import InMemoryStore


class FakeProvider(ExampleProvider):
    """
    Serves https://fake.test/<name>/<term>, payload {"examples": [...]}.
    """

    def __init__(self, name: str, configured: bool = True, timeout: float = 5.0):
        self.name = name
        self.configured = configured
        self.timeout = timeout

    def is_configured(self) -> bool:
        return self.configured

    def build_request(self, term: str) -> ProviderRequest:
        return ProviderRequest(url=f"https://fake.test/{self.name}/{term}")

    def parse(self, payload: Any) -> List[str]:
        return WordsApiResponse.model_validate(payload).examples


class Router:
    """
    MockTransport handler: provider name -> response factory. Records calls.
    """

    def __init__(self, routes):
        self.routes = routes
        self.calls: List[str] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        provider = request.url.path.split("/")[1]
        self.calls.append(provider)
        return await self.routes[provider](request)


def _json(payload, status=200, headers=None):
    async def respond(request):
        return httpx.Response(status, json=payload, headers=headers)

    return respond


def _run(retriever: ExampleRetriever, router: Router, word: str = "cat"):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(router)) as client:
            retriever.client = client
            return await retriever.retrieve(word, "animal")

    return asyncio.run(go())


def _retriever(*providers, store=None, rate_limiter=None):
    return ExampleRetriever(
        providers=list(providers),
        cache=ExampleCache(store if store is not None else InMemoryStore()),
        rate_limiter=rate_limiter or RateLimiter(),
    )


def test_build_search_terms():
    assert build_search_terms("cat") == ["cat"]
    assert build_search_terms("Teddy  Bear") == ["teddy bear", "bear"]
    assert build_search_terms("2d barcode") == ["2d barcode", "barcode"]
    assert build_search_terms("dining room table and chairs") == [
        "dining room table and chairs",
        "table",
        "dining table",
        "chairs",
    ]


def test_deduplicate_is_idempotent_and_keeps_first():
    candidates = [
        CandidateExample(text="The cat sat.", source="A"),
        CandidateExample(text="  the CAT sat. ", source="B"),
        CandidateExample(text="A cat ran.", source="B"),
    ]
    once = deduplicate(candidates)
    assert [(c.text, c.source) for c in once] == [("The cat sat.", "A"), ("A cat ran.", "B")]
    assert deduplicate(once) == once


def test_failing_provider_does_not_abort_others():
    router = Router(
        {
            "good": _json({"examples": ["the cat sat on the mat", "The cat slept."]}),
            "broken": _json({"error": "boom"}, status=500),
        }
    )
    candidates = _run(_retriever(FakeProvider("broken"), FakeProvider("good")), router)

    assert [c.text for c in candidates] == ["The cat sat on the mat.", "The cat slept."]
    assert {c.source for c in candidates} == {"good"}
    assert all(c.search_term == "cat" for c in candidates)


def test_merge_deduplicates_across_providers():
    router = Router(
        {
            "first": _json({"examples": ["The cat slept."]}),
            "second": _json({"examples": ["the cat slept.", "A cat ran home."]}),
        }
    )
    candidates = _run(_retriever(FakeProvider("first"), FakeProvider("second")), router)
    assert [(c.text, c.source) for c in candidates] == [
        ("The cat slept.", "first"),
        ("A cat ran home.", "second"),
    ]


def test_transport_error_and_malformed_payload_yield_nothing():
    async def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    async def not_json(request):
        return httpx.Response(200, text="<html>oops</html>")

    router = Router(
        {
            "down": refuse,
            "html": not_json,
            "shape": _json({"examples": "not a list"}),
        }
    )
    retriever = _retriever(FakeProvider("down"), FakeProvider("html"), FakeProvider("shape"))
    assert _run(retriever, router) == []


def test_slow_provider_times_out():
    async def slow(request):
        await asyncio.sleep(1)
        return httpx.Response(200, json={"examples": ["The cat is slow."]})

    router = Router({"slow": slow, "fast": _json({"examples": ["The cat is fast."]})})
    retriever = _retriever(FakeProvider("slow", timeout=0.05), FakeProvider("fast"))

    assert [c.text for c in _run(retriever, router)] == ["The cat is fast."]


def test_results_are_cached_and_reused():
    store = InMemoryStore()
    router = Router({"good": _json({"examples": ["The cat slept."]})})
    retriever = _retriever(FakeProvider("good"), store=store)

    _run(retriever, router)
    second = _run(retriever, router)

    assert router.calls == ["good"]
    assert [c.text for c in second] == ["The cat slept."]
    assert len(store) == 1


def test_not_found_and_empty_results_are_not_cached():
    store = InMemoryStore()
    router = Router(
        {
            "missing": _json({"title": "No Definitions Found"}, status=404),
            "empty": _json({"examples": []}),
        }
    )
    retriever = _retriever(FakeProvider("missing"), FakeProvider("empty"), store=store)

    assert _run(retriever, router) == []
    assert len(store) == 0


def test_raw_results_are_capped():
    examples = [f"The cat number {i} slept." for i in range(15)]
    router = Router({"many": _json({"examples": examples})})
    assert len(_run(_retriever(FakeProvider("many")), router)) == 10


def test_throttled_provider_is_skipped_until_reset():
    router = Router(
        {
            "busy": _json({}, status=429, headers={"Retry-After": "60"}),
            "good": _json({"examples": ["The cat slept."]}),
        }
    )
    retriever = _retriever(FakeProvider("busy"), FakeProvider("good"))

    _run(retriever, router)
    _run(retriever, router)

    assert router.calls.count("busy") == 1
    assert not retriever.rate_limiter.is_available("busy")


def test_unconfigured_and_exhausted_providers_are_not_called():
    limiter = RateLimiter(monthly_limits={"capped": 0})
    router = Router({"good": _json({"examples": ["The cat slept."]})})
    retriever = _retriever(
        FakeProvider("nokey", configured=False),
        FakeProvider("capped"),
        FakeProvider("good"),
        rate_limiter=limiter,
    )

    candidates = _run(retriever, router)

    assert router.calls == ["good"]
    assert [c.source for c in candidates] == ["good"]


def test_every_search_term_is_queried():
    router = Router({"good": _json({"examples": []})})
    _run(_retriever(FakeProvider("good")), router, word="teddy bear")
    assert router.calls == ["good", "good"]


def test_quota_is_reserved_per_lookup():
    limiter = RateLimiter(monthly_limits={"capped": 1})
    router = Router({"capped": _json({"examples": ["The teddy bear sat."]})})
    retriever = _retriever(FakeProvider("capped"), rate_limiter=limiter)

    _run(retriever, router, word="teddy bear")

    assert router.calls == ["capped"]
    assert limiter.quota("capped").request_count == 1
