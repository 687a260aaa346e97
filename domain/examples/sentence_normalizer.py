import logging
from typing import Optional

import regex as re

# Runs of three or more dots, spaced ". . .", or the ellipsis glyph, possibly repeated.
_ELLIPSIS = r"(?:\.{3,}|(?:\.\s){2,}\.|…)(?:\s*(?:\.{3,}|(?:\.\s){2,}\.|…))*"
_LEADING_ELLIPSIS_RE = re.compile(rf"^\s*{_ELLIPSIS}\s*")
_TRAILING_ELLIPSIS_RE = re.compile(rf"\s*{_ELLIPSIS}\s*$")
_INNER_ELLIPSIS_RE = re.compile(rf"\s*{_ELLIPSIS}\s*")

_NUMBERED_PREFIX_RE = re.compile(r"^\s*(?:\d+[\.\)]|[a-z]\))\s+")
_BRACKET_SPAN_RE = re.compile(r"\[[^\[\]]*\]|\{[^{}]*\}|<[^<>]*>")
_CITATION_RE = re.compile(
    r"""
    \(\s*(?:
        \p{Lu}[^()]{0,60}?\b(?:1[5-9]|20)\d{2}[a-z]?      # (Jones 2001), (Smith et al., 1999a)
      | (?:1[5-9]|20)\d{2}[a-z]?                          # (2001)
      | pp?\.\s*\d+(?:\s*[-–]\s*\d+)?                      # (p. 12), (pp. 3-4)
      | (?i:source|citation|reference|ref|cf)\s*[:.][^()]* # (Source: ...)
    )\s*\)
    """,
    re.VERBOSE,
)
_WRAPPING_QUOTES = "\"'“”‘’«»„`"

_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.!?;:])")
_MISSING_SPACE_AFTER_RE = re.compile(r"([,;:!?])(?=\p{L})")
_MISSING_SPACE_AFTER_PERIOD_RE = re.compile(r"\.(?=\p{Lu}\p{Ll})")
_REPEATED_PUNCT_RE = re.compile(r"([,.!?;:])\1+")
_SENTENCE_START_RE = re.compile(r"([.!?]\s+)(\p{Ll})")

_PUNCT_CHAR_RE = re.compile(r"\p{P}")
# Apostrophes and hyphens joining word characters: "isn't", "dog's", "t-shirt".
_INWORD_MARK_RE = re.compile(r"(?<=\w)['’-](?=\w)")
_LEFTOVER_RE = re.compile(r"\.{3,}|…|[\[\]{}<>]")


def _strip_ellipses(text: str) -> str:
    text = _LEADING_ELLIPSIS_RE.sub("", text)
    text = _TRAILING_ELLIPSIS_RE.sub(".", text)
    return _INNER_ELLIPSIS_RE.sub(" ", text)


def _strip_markup(text: str) -> str:
    text = _NUMBERED_PREFIX_RE.sub("", text)
    text = _BRACKET_SPAN_RE.sub(" ", text)
    text = _CITATION_RE.sub(" ", text)
    text = text.strip()
    # Only strip quotes that wrap the whole text, keep inner quotes intact
    while len(text) > 1 and text[0] in _WRAPPING_QUOTES and text[-1] in _WRAPPING_QUOTES:
        text = text[1:-1].strip()
    if text and text[0] in _WRAPPING_QUOTES and text.count(text[0]) == 1:
        text = text[1:].strip()
    if text and text[-1] in _WRAPPING_QUOTES and text.count(text[-1]) == 1:
        text = text[:-1].strip()
    return text


def _fix_spacing(text: str) -> str:
    text = " ".join(text.split())
    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    text = _REPEATED_PUNCT_RE.sub(r"\1", text)
    text = _MISSING_SPACE_AFTER_RE.sub(r"\1 ", text)
    text = _MISSING_SPACE_AFTER_PERIOD_RE.sub(". ", text)
    return text.strip()


def _capitalize(text: str) -> str:
    if text and text[0].islower():
        text = text[0].upper() + text[1:]
    return _SENTENCE_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def is_valid_sentence(text: str) -> bool:
    """
    Structural validation of an already cleaned sentence.
    """
    if len(text) < 3:
        return False
    words = text.split()
    if len(words) < 2:
        return False
    marks = _PUNCT_CHAR_RE.findall(_INWORD_MARK_RE.sub("", text))
    if len(marks) / len(words) > 0.5:
        return False
    if _LEFTOVER_RE.search(text):
        return False
    first = text[0]
    if _PUNCT_CHAR_RE.match(first) or first.islower():
        return False
    return True


def clean_sentence(raw: str) -> Optional[str]:
    """
    Repair a sentence fragment returned by an external source.
    1. Ellipsis runs: dropped at the start and inside, a trailing one becomes a period.
    2. Numbered prefixes, bracket spans, citations and wrapping quotes are removed.
    3. Whitespace and punctuation spacing are normalized, repeated marks collapsed.
    4. First letter of the text and of each following sentence is capitalized.
    5. A terminal period is appended when no . ! ? ends the text.
    Returns None when the result is not a usable sentence.
    """
    if not raw:
        return None

    text = _strip_ellipses(raw)
    text = _strip_markup(text)
    text = _fix_spacing(text)
    text = _capitalize(text)

    if text and text[-1] not in ".!?":
        text = text.rstrip(",;:") + "."

    if not is_valid_sentence(text):
        logging.debug("Discarded malformed sentence: %r -> %r", raw, text)
        return None
    return text
