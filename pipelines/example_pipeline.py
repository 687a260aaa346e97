import logging
import random
import time
from typing import Optional

from common import supabase_client
from common.constants import SOURCE_TEMPLATE_PREFIX
from core.ports import KeyValueStore, TranslateFn
from core.versions import FILTER_VERSION
from domain.examples.example_cache import ExampleCache
from domain.examples.providers.provider_factory import ProviderFactory
from domain.examples.quality_filters import QualityFilterPipeline
from domain.examples.retriever import ExampleRetriever
from domain.examples.schemas.schema import ExampleSentence
from domain.examples.scoring import score_and_rank
from domain.examples.template_generator import TemplateGenerator, TemplateHistory
from domain.examples.word_categorizer import categorize, normalize_category
from infra.memory.memory_store import InMemoryStore
from infra.supabase.cache_repo import SBCacheIO


def _t():
    return time.perf_counter()


class ExamplePipeline:
    """
    Word -> one English example sentence plus its translation.

    1) categorize the word (or use the caller's category)
    2) retrieve candidates from every usable provider
    3) keep candidates passing all quality stages
    4) score, rank and take the best one
    5) otherwise fall back to a template sentence
    6) translate the chosen sentence
    """

    def __init__(
        self,
        retriever: ExampleRetriever,
        generator: TemplateGenerator,
        filters: Optional[QualityFilterPipeline] = None,
    ):
        self.retriever = retriever
        self.generator = generator
        self.filters = filters or QualityFilterPipeline()

    def _resolve_category(self, word: str, category: Optional[str]) -> str:
        normalized = normalize_category(category)
        if category and normalized is None:
            logging.info(f"Unknown category {category!r} for {word!r}, categorizing instead")
        return normalized or categorize(word)

    async def choose_english(self, word: str, category: str) -> tuple[str, str]:
        """
        Returns (sentence, source). Never fails: the template path is total.
        """
        candidates = await self.retriever.retrieve(word, category)
        accepted = [c for c in candidates if self.filters.accepts(c.text, word, category)]
        logging.info(
            f"{len(accepted)}/{len(candidates)} candidates passed filters ({FILTER_VERSION})"
        )

        ranked = score_and_rank(accepted, word)
        if ranked:
            best = ranked[0]
            logging.info(f"Picked {best.source} example (score {best.score}): {best.text!r}")
            return best.text, best.source

        choice = self.generator.generate(word, category)
        source = f"{SOURCE_TEMPLATE_PREFIX}_{choice.template_category}_{choice.complexity_tier}"
        return choice.text, source

    async def get_example_sentence(
        self,
        word: str,
        target_language_code: str,
        translate: TranslateFn,
        category: Optional[str] = None,
    ) -> ExampleSentence:
        """
        The only entry point callers need.
        Errors raised by translate propagate unchanged.
        """
        word = " ".join((word or "").split())
        if not word:
            raise ValueError("Word must not be empty")

        t0 = _t()
        resolved = self._resolve_category(word, category)
        english, source = await self.choose_english(word, resolved)
        translated = await translate(english, target_language_code)

        logging.info(f"Example for {word!r} ({resolved}) from {source} in {_t() - t0:.2f}s")
        return ExampleSentence(english=english, translated=translated, source=source)


def build_example_pipeline(
    store: Optional[KeyValueStore] = None,
    history: Optional[TemplateHistory] = None,
    rng: Optional[random.Random] = None,
) -> ExamplePipeline:
    """
    Default wiring: Supabase-backed cache when configured, in-memory otherwise.
    """
    if store is None:
        if supabase_client.is_configured():
            store = SBCacheIO(supabase_client.get_client())
        else:
            logging.info("Supabase not configured, caching examples in memory")
            store = InMemoryStore()

    retriever = ExampleRetriever(
        providers=ProviderFactory.create_default_providers(),
        cache=ExampleCache(store),
    )
    generator = TemplateGenerator(history=history, rng=rng)
    return ExamplePipeline(retriever=retriever, generator=generator)
