from typing import List, Optional

import regex as re

from common.constants import SOURCE_WEIGHTS
from domain.examples.schemas.schema import CandidateExample, ScoredExample

EXACT_MATCH_BONUS = 100
LENGTH_BONUS = 5
TOKEN_COUNT_BONUS = 10
SHORT_PENALTY = -20
MISSING_TOKEN_PENALTY = -50
SCATTERED_TOKENS_BONUS = 20
MIN_ACCEPTED_SCORE = -10

GOOD_CHAR_RANGE = (20, 80)
GOOD_TOKEN_RANGE = (6, 15)
SHORT_TOKEN_COUNT = 3


def _contains(text: str, phrase: str) -> bool:
    pattern = r"\s+".join(re.escape(t) for t in phrase.split())
    return re.search(rf"\b{pattern}\b", text, re.IGNORECASE) is not None


def score_candidate(candidate: CandidateExample, word: str) -> float:
    text = candidate.text
    word = " ".join(word.lower().split())
    score = 0.0

    exact = _contains(text, word)
    if exact:
        score += EXACT_MATCH_BONUS

    tokens = word.split(" ")
    if len(tokens) > 1:
        present = [_contains(text, t) for t in tokens]
        if not all(present):
            score += MISSING_TOKEN_PENALTY
        elif not exact:
            score += SCATTERED_TOKENS_BONUS

    score += SOURCE_WEIGHTS.get(candidate.source, 0)

    if GOOD_CHAR_RANGE[0] <= len(text) <= GOOD_CHAR_RANGE[1]:
        score += LENGTH_BONUS

    n_tokens = len(text.split())
    if GOOD_TOKEN_RANGE[0] <= n_tokens <= GOOD_TOKEN_RANGE[1]:
        score += TOKEN_COUNT_BONUS
    elif n_tokens <= SHORT_TOKEN_COUNT:
        score += SHORT_PENALTY

    return score


def score_and_rank(candidates: List[CandidateExample], word: str) -> List[ScoredExample]:
    """
    Score every candidate, drop those at or below the floor, best first.
    sorted() is stable so equal scores keep retrieval order.
    """
    scored = [
        ScoredExample(**c.model_dump(), score=score_candidate(c, word)) for c in candidates
    ]
    kept = [s for s in scored if s.score > MIN_ACCEPTED_SCORE]
    return sorted(kept, key=lambda s: s.score, reverse=True)


def select_best(candidates: List[CandidateExample], word: str) -> Optional[ScoredExample]:
    ranked = score_and_rank(candidates, word)
    return ranked[0] if ranked else None
