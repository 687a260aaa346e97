import logging
import random
from collections import OrderedDict
from typing import Optional

import regex as re

from domain.examples.morphology import indefinite_article, pluralize
from domain.examples.schemas.schema import ComplexityTier, TemplateChoice
from domain.examples.templates import TEMPLATES
from domain.examples.word_categorizer import is_plural_word

MAX_HISTORY = 5
MAX_TRACKED_KEYS = 1000

TIERS: tuple[ComplexityTier, ...] = ("basic", "intermediate", "advanced")
DEFAULT_WEIGHTS = (50, 30, 20)
SIMPLE_WEIGHTS = (60, 30, 10)

SIMPLE_CATEGORIES = frozenset({"animal", "toy"})
SIMPLE_WORDS = frozenset({"bear", "teddy bear"})
SHORT_WORD_CHARS = 4

_PLURAL_VERBS = {"is": "are", "was": "were", "has": "have"}
_PLURAL_DEMONSTRATIVES = {"this": "these", "that": "those"}


class TemplateHistory:
    """
    Recently used templates per (word, category), most recent last.
    Keys are evicted least-recently-used once more than max_keys are tracked.
    Lives as long as its owner, usually the process.
    """

    def __init__(self, max_keys: int = MAX_TRACKED_KEYS):
        self.max_keys = max_keys
        self._entries: "OrderedDict[tuple[str, str], list[str]]" = OrderedDict()

    def recent(self, key: tuple[str, str]) -> list[str]:
        if key not in self._entries:
            return []
        self._entries.move_to_end(key)
        return list(self._entries[key])

    def record(self, key: tuple[str, str], template: str, limit: int) -> None:
        entries = self._entries.setdefault(key, [])
        entries.append(template)
        del entries[: max(0, len(entries) - limit)]
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_keys:
            self._entries.popitem(last=False)

    def clear(self, key: tuple[str, str]) -> None:
        self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)


def tier_weights(word: str, category: str) -> tuple[int, int, int]:
    """
    Simple words lean harder towards basic templates.
    """
    word = word.lower()
    if (
        category in SIMPLE_CATEGORIES
        or word in SIMPLE_WORDS
        or is_plural_word(word)
        or len(word) <= SHORT_WORD_CHARS
    ):
        return SIMPLE_WEIGHTS
    return DEFAULT_WEIGHTS


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _ensure_terminal(text: str) -> str:
    return text if text.endswith((".", "!", "?")) else text + "."


def adjust_grammar(text: str, word: str, plural: bool, uncountable: bool) -> str:
    """
    Article and agreement fixes around the filled-in word.
    """
    w = re.escape(word)

    if plural or uncountable:
        # "a new {word}" -> "new {word}"
        text = re.sub(rf"\b[Aa]n?\s+((?:\w+\s+)?)(?={w}\b)", r"\1", text)
    else:
        article = indefinite_article(word)

        def _fix_article(m: "re.Match") -> str:
            return _capitalize(article) if m.group(1) == "A" else article

        text = re.sub(rf"\b([Aa])n?(?=\s+{w}\b)", _fix_article, text)

    if plural:

        def _verb(m: "re.Match") -> str:
            return f"{m.group(1)} {_PLURAL_VERBS[m.group(2)]}"

        def _verb_before(m: "re.Match") -> str:
            return f"{_PLURAL_VERBS[m.group(1).lower()]}{m.group(2)}"

        def _demonstrative(m: "re.Match") -> str:
            plural_form = _PLURAL_DEMONSTRATIVES[m.group(1).lower()]
            if m.group(1)[0].isupper():
                plural_form = _capitalize(plural_form)
            return plural_form + m.group(2)

        text = re.sub(rf"\b({w})\s+(is|was|has)\b", _verb, text)
        text = re.sub(
            rf"\b(is|was)(\s+(?:the|my|your|his|her|our|their)\s+{w}\b)",
            _verb_before,
            text,
            flags=re.IGNORECASE,
        )
        text = re.sub(
            rf"\b(this|that)(\s+{w}\b)", _demonstrative, text, flags=re.IGNORECASE
        )

    return text


class TemplateGenerator:
    """
    Last-resort example sentences. Always returns a sentence that contains the word.
    """

    def __init__(
        self,
        templates: Optional[dict[str, dict[str, list[str]]]] = None,
        history: Optional[TemplateHistory] = None,
        rng: Optional[random.Random] = None,
    ):
        self.templates = templates or TEMPLATES
        self.history = history if history is not None else TemplateHistory()
        self.rng = rng or random.Random()

    def pool_category(self, word: str, category: str) -> str:
        if category == "verb" and word.lower().endswith("ing") and "gerund" in self.templates:
            return "gerund"
        if category in self.templates:
            return category
        return "general"

    def choose_tier(self, word: str, category: str) -> ComplexityTier:
        weights = tier_weights(word, category)
        return self.rng.choices(TIERS, weights=weights, k=1)[0]

    def _pool(self, pool_category: str, tier: ComplexityTier) -> list[str]:
        pool = self.templates.get(pool_category, {}).get(tier)
        if not pool:
            pool = self.templates["general"][tier]
        return pool

    def _pick(self, key: tuple[str, str], pool: list[str]) -> str:
        recent = self.history.recent(key)
        available = [t for t in pool if t not in recent]

        if not available:
            # pool exhausted: start over, but never repeat the last pick
            previous = recent[-1] if recent else None
            self.history.clear(key)
            available = [t for t in pool if t != previous] if len(pool) > 1 else list(pool)

        choice = self.rng.choice(available)
        self.history.record(key, choice, limit=min(MAX_HISTORY, len(pool)))
        return choice

    def generate(self, word: str, category: str) -> TemplateChoice:
        word = " ".join(word.split())
        pool_category = self.pool_category(word, category)
        tier = self.choose_tier(word, category)
        template = self._pick((word.lower(), category), self._pool(pool_category, tier))

        plural = is_plural_word(word)
        uncountable = category == "uncountable_clothing"
        words = word if (plural or uncountable) else pluralize(word)

        text = template.replace("{words}", words).replace("{word}", word)
        text = adjust_grammar(text, word, plural=plural, uncountable=uncountable)
        text = _ensure_terminal(_capitalize(text.strip()))

        logging.info(f"Template fallback for {word!r} ({category}): {pool_category}/{tier}")
        return TemplateChoice(text=text, complexity_tier=tier, template_category=pool_category)
