import asyncio
import logging
from typing import Iterable, List, Optional

import httpx
from pydantic import ValidationError

from common.constants import CACHE_MAX_RAW_RESULTS, PROVIDER_WORDS_API, WORDS_API_MONTHLY_LIMIT
from domain.examples.example_cache import ExampleCache, RateLimiter, cache_key
from domain.examples.morphology import technical_head
from domain.examples.providers.provider import ExampleProvider
from domain.examples.schemas.schema import CandidateExample
from domain.examples.sentence_normalizer import clean_sentence

USER_AGENT = "ExampleSentenceBot/1.0 (Educational Project)"

# Tokens that carry no meaning on their own in long object names.
_FILLER_TOKENS = frozenset({"&", "and", "the", "a", "an", "room", "of"})


def build_search_terms(word: str) -> List[str]:
    """
    Search terms for a word, most specific first.
    The word itself always; for multi-token words also the last token,
    the head of a technical prefix pattern, and key nouns of long names.
    """
    word = " ".join(word.lower().split())
    tokens = word.split(" ")
    terms = [word]

    if len(tokens) > 1:
        head = technical_head(word)
        if head:
            terms.append(head)

        if len(tokens) > 3:
            key_tokens = [t for t in tokens if t not in _FILLER_TOKENS]
            if "table" in key_tokens:
                terms.append("table")
                if "dining" in key_tokens:
                    terms.append("dining table")
                if "kitchen" in key_tokens:
                    terms.append("kitchen table")

        terms.append(tokens[-1])

    # keep order, drop repeats
    return list(dict.fromkeys(t for t in terms if t))


def deduplicate(candidates: Iterable[CandidateExample]) -> List[CandidateExample]:
    """
    Drop candidates whose trimmed, case-folded text was already seen.
    First occurrence wins, order preserved.
    """
    seen = set()
    unique = []
    for candidate in candidates:
        normalized = candidate.text.strip().lower()
        if normalized in seen:
            continue
        seen.add(normalized)
        unique.append(candidate)
    return unique


class ExampleRetriever:
    """
    Concurrent fan-out over every (search term, provider) pair.
    A failing provider contributes an empty list and never aborts the others.
    """

    def __init__(
        self,
        providers: List[ExampleProvider],
        cache: ExampleCache,
        rate_limiter: Optional[RateLimiter] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.providers = providers
        self.cache = cache
        self.rate_limiter = rate_limiter or RateLimiter(
            monthly_limits={PROVIDER_WORDS_API: WORDS_API_MONTHLY_LIMIT}
        )
        self.client = client

    def _active_providers(self) -> List[ExampleProvider]:
        active = []
        for provider in self.providers:
            if not provider.is_configured():
                continue
            if not self.rate_limiter.is_available(provider.name):
                logging.info(f"Skipping {provider.name}: rate limited or out of quota")
                continue
            active.append(provider)
        return active

    async def _fetch_raw(
        self, client: httpx.AsyncClient, provider: ExampleProvider, term: str
    ) -> Optional[List[str]]:
        """
        One network lookup. Returns None on failure, [] when the provider has no data.
        """
        # check and reserve together, concurrent lookups share the quota
        if not self.rate_limiter.is_available(provider.name):
            logging.info(f"Skipping {provider.name} for {term!r}: quota used up")
            return None
        self.rate_limiter.record_attempt(provider.name)
        req = provider.build_request(term)

        try:
            response = await asyncio.wait_for(
                client.get(
                    req.url, params=req.params, headers=req.headers, timeout=provider.timeout
                ),
                timeout=provider.timeout,
            )
        except asyncio.TimeoutError:
            logging.warning(f"{provider.name} timed out for {term!r} after {provider.timeout}s")
            return None
        except httpx.HTTPError as e:
            logging.warning(f"{provider.name} request failed for {term!r}: {e}")
            return None

        if response.status_code == 429:
            self.rate_limiter.record_throttled(provider.name, response.headers.get("Retry-After"))
            return None
        if response.status_code == 404:
            logging.debug(f"{provider.name} has no entry for {term!r}")
            return []
        if not response.is_success:
            logging.warning(f"{provider.name} returned {response.status_code} for {term!r}")
            return None

        try:
            texts = provider.parse(response.json())
        except (ValueError, ValidationError) as e:
            logging.warning(f"{provider.name} sent a malformed payload for {term!r}: {e}")
            return None

        return texts[:CACHE_MAX_RAW_RESULTS]

    async def _lookup(
        self, client: httpx.AsyncClient, provider: ExampleProvider, term: str
    ) -> List[CandidateExample]:
        key = cache_key(provider.name, term)
        raw = await self.cache.get(key)

        if raw is None:
            raw = await self._fetch_raw(client, provider, term)
            if raw is None:
                return []
            if raw:
                await self.cache.set(key, raw)
        else:
            logging.debug(f"Using cached {provider.name} examples for {term!r}")

        candidates = []
        for text in raw:
            if not isinstance(text, str):
                continue
            cleaned = clean_sentence(text)
            if cleaned:
                candidates.append(
                    CandidateExample(text=cleaned, source=provider.name, search_term=term)
                )
        return candidates

    async def _gather(self, client: httpx.AsyncClient, terms: List[str]) -> List[CandidateExample]:
        providers = self._active_providers()
        tasks = [
            self._lookup(client, provider, term) for term in terms for provider in providers
        ]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        merged: List[CandidateExample] = []
        for result in results:
            if isinstance(result, BaseException):
                logging.warning(f"Provider lookup crashed: {result!r}")
                continue
            merged.extend(result)
        return merged

    async def retrieve(self, word: str, category: Optional[str] = None) -> List[CandidateExample]:
        """
        Candidates for a word from all usable providers, merged and deduplicated.
        Never raises for provider-level failures.
        """
        terms = build_search_terms(word)
        logging.info(f"Retrieving examples for {word!r} ({category}) with terms {terms}")

        if self.client is not None:
            merged = await self._gather(self.client, terms)
        else:
            async with httpx.AsyncClient(headers={"User-Agent": USER_AGENT}) as client:
                merged = await self._gather(client, terms)

        unique = deduplicate(merged)
        logging.info(f"Collected {len(merged)} examples, {len(unique)} unique")
        return unique
