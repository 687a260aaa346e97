import logging
from typing import Callable, List, Optional, Tuple

import regex as re

from domain.examples.context_rules import ContextRule, rule_for
from domain.examples.morphology import generate_variants, technical_head

###########################################################
# Candidate sentence filters, evaluated in order, stopping at the first rejection:
# 1. basic_quality: length, punctuation, no meta-commentary
# 2. contains_word: the target word (or an accepted compound form) is present
# 3. has_conflicting_form: the word only inside a longer word, or an inflected variant
# 4. fits_context: category/word specific context cues
# 5. suits_learner: readable length, vocabulary and word placement
###########################################################

MIN_WORDS, MAX_WORDS = 3, 25
LEARNER_MIN_WORDS, LEARNER_MAX_WORDS = 5, 20
LONG_WORD_CHARS = 8
MAX_LONG_WORD_SHARE = 0.2
LATEST_WORD_POSITION = 0.7

_META_RE = re.compile(
    r"""
    \bexamples?\s+of\b
  | \bexample\s*:
  | \bsee\s+also\b
  | \bcitation\s+needed\b
  | \bretrieved\s+from\b
  | https?://
  | \bwww\.
  | \.(?:com|org|net)\b
  | \bwikipedia\b
  | \((?:p|pp)\.\s*\d+
  | \(\s*\p{Lu}[^()]*\b(?:1[5-9]|20)\d{2}\s*\)
    """,
    re.IGNORECASE | re.VERBOSE,
)
_LABEL_PREFIX_RE = re.compile(
    r"^\s*(?:note|source|example|usage|definition|synonyms?|antonyms?|see)\s*:",
    re.IGNORECASE,
)
_DEFINITION_RE = re.compile(
    r"\b(?:is|are)\s+(?:a|an)\s+(?:type|kind|form|sort)\s+of\b", re.IGNORECASE
)
_INAPPROPRIATE_RE = re.compile(
    r"\b(?:kill\w*|die|died|dies|dying|death|murder\w*|suicide|sex|porn\w*|explicit|violent)\b",
    re.IGNORECASE,
)
_TOKEN_RE = re.compile(r"\b\w+\b")
_STRIP_PUNCT_RE = re.compile(r"[\p{P}\p{S}]+")

# Longer forms that mean the same thing as the word, with optional context cues
# that must be present for the exemption to apply.
COMPOUND_EXCEPTIONS: dict[str, dict[str, tuple[str, ...]]] = {
    "glass": {"glasses": ("eye", "read", "see", "vision")},
    "glasses": {"eyeglasses": ()},
}


def _normalize_word(word: str) -> str:
    return " ".join(word.lower().split())


def _has_cue(text_lower: str, cues: tuple[str, ...]) -> bool:
    return any(re.search(rf"\b{re.escape(cue)}", text_lower) for cue in cues)


def _whole_word(term: str) -> "re.Pattern":
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


def locate_word(text: str, word: str) -> Optional[int]:
    """
    Start index of the first acceptable occurrence of the word, None if absent.
    Multi-token words accept the full phrase, the hyphenated phrase,
    the head of a technical pattern, or a final token longer than 3 chars.
    """
    word = _normalize_word(word)
    tokens = word.split(" ")

    if len(tokens) == 1:
        m = _whole_word(word).search(text)
        return m.start() if m else None

    phrase = r"\s+".join(re.escape(t) for t in tokens)
    hyphenated = "-".join(re.escape(t) for t in tokens)
    for pattern in (phrase, hyphenated):
        m = re.search(rf"\b{pattern}\b", text, re.IGNORECASE)
        if m:
            return m.start()

    head = technical_head(word)
    if head and len(head.split(" ")) == 1:
        m = _whole_word(head).search(text)
        if m:
            return m.start()

    last = tokens[-1]
    if len(last) > 3:
        m = _whole_word(last).search(text)
        if m:
            return m.start()
    return None


# ----------------- Stages -----------------


def basic_quality(text: str, word: str, category: Optional[str] = None) -> bool:
    words = text.split()
    if len(words) < MIN_WORDS or len(words) > MAX_WORDS:
        return False
    if ";" in text:
        return False
    if _META_RE.search(text) or _LABEL_PREFIX_RE.search(text):
        return False
    if _DEFINITION_RE.search(text) or _INAPPROPRIATE_RE.search(text):
        return False
    return text.strip().endswith((".", "!", "?"))


def contains_word(text: str, word: str, category: Optional[str] = None) -> bool:
    return locate_word(text, word) is not None


def _is_exempt(word: str, form: str, text_lower: str) -> bool:
    exceptions = COMPOUND_EXCEPTIONS.get(word, {})
    if form not in exceptions:
        return False
    cues = exceptions[form]
    return not cues or _has_cue(text_lower, cues)


def has_conflicting_form(text: str, word: str, category: Optional[str] = None) -> bool:
    """
    True when the text uses the word only as part of a longer word,
    or uses an inflected variant instead of the exact form.
    """
    word = _normalize_word(word)
    text_lower = text.lower()

    if len(word) > 2:
        for token in _TOKEN_RE.findall(text_lower):
            if token == word or word not in token:
                continue
            if _is_exempt(word, token, text_lower):
                continue
            logging.debug(f"Compound form {token!r} of {word!r}")
            return True

    for variant in generate_variants(word):
        if _is_exempt(word, variant, text_lower):
            continue
        if _whole_word(variant).search(text):
            logging.debug(f"Variant form {variant!r} of {word!r}")
            return True
    return False


def _near(text_lower: str, word: str, cues: tuple[str, ...], window: int) -> bool:
    word_at = locate_word(text_lower, word)
    if word_at is None:
        return False
    for cue in cues:
        for m in _whole_word(cue).finditer(text_lower):
            if abs(m.start() - word_at) < window:
                return True
    return False


def _rule_passes(rule: ContextRule, text: str, word: str) -> bool:
    text_lower = text.lower()

    if any(re.search(p, text_lower, re.IGNORECASE) for p in rule.forbidden_patterns):
        return False
    if rule.forbidden_near and _near(text_lower, word, rule.forbidden_near, rule.near_window):
        return False

    has_required = not rule.required_any or _has_cue(text_lower, rule.required_any)
    has_forbidden = bool(rule.forbidden_any) and _has_cue(text_lower, rule.forbidden_any)
    if rule.lenient:
        return has_required or not has_forbidden
    return has_required and not has_forbidden


def fits_context(text: str, word: str, category: Optional[str] = None) -> bool:
    rule = rule_for(word, category)
    if rule is None:
        return True
    return _rule_passes(rule, text, word)


def suits_learner(text: str, word: str, category: Optional[str] = None) -> bool:
    words = text.split()
    if len(words) < LEARNER_MIN_WORDS or len(words) > LEARNER_MAX_WORDS:
        return False

    target_tokens = set(_normalize_word(word).split(" "))
    long_words = 0
    for w in words:
        clean = _STRIP_PUNCT_RE.sub("", w.lower())
        if len(clean) > LONG_WORD_CHARS and clean not in target_tokens:
            long_words += 1
    if long_words / len(words) > MAX_LONG_WORD_SHARE:
        return False

    position = locate_word(text, word)
    if position is None:
        position = text.lower().find(_normalize_word(word))
    if position > len(text) * LATEST_WORD_POSITION:
        return False
    return True


# ----------------- Pipeline -----------------

Stage = Callable[[str, str, Optional[str]], bool]


def _no_conflicting_form(text: str, word: str, category: Optional[str] = None) -> bool:
    return not has_conflicting_form(text, word, category)


STAGES: List[Tuple[str, Stage]] = [
    ("basic quality", basic_quality),
    ("no exact word match", contains_word),
    ("compound or variant form", _no_conflicting_form),
    ("inappropriate context", fits_context),
    ("complexity", suits_learner),
]


class QualityFilterPipeline:
    """
    Pure, ordered chain of predicates. A sentence is accepted only if every stage passes.
    """

    def __init__(self, stages: Optional[List[Tuple[str, Stage]]] = None):
        self.stages = stages or STAGES

    def first_rejection(self, text: str, word: str, category: Optional[str] = None) -> Optional[str]:
        """
        Name of the first failing stage, None when accepted.
        """
        for name, stage in self.stages:
            if not stage(text, word, category):
                return name
        return None

    def accepts(self, text: str, word: str, category: Optional[str] = None) -> bool:
        rejection = self.first_rejection(text, word, category)
        if rejection:
            logging.debug(f"Rejected ({rejection}) for {word!r}: {text!r}")
            return False
        return True


def accepts(text: str, word: str, category: Optional[str] = None) -> bool:
    return QualityFilterPipeline().accepts(text, word, category)
