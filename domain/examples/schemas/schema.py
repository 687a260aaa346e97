from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

WordCategory = Literal[
    "person",
    "animal",
    "clothing",
    "uncountable_clothing",
    "eyewear",
    "jewelry",
    "tool",
    "toy",
    "verb",
    "adjective",
    "noun",
    "general",
]

ComplexityTier = Literal["basic", "intermediate", "advanced"]


class CandidateExample(BaseModel):
    """
    One sentence fetched from a provider, already cleaned.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    source: str  # provider id
    search_term: Optional[str] = None


class ScoredExample(CandidateExample):
    score: float


class CacheEntry(BaseModel):
    value: Any
    timestamp: int  # epoch ms


class ProviderQuota(BaseModel):
    provider: str
    request_count: int = 0
    monthly_limit: Optional[int] = None  # None means unlimited
    rate_limit_reset_time: float = 0.0  # epoch seconds


class TemplateChoice(BaseModel):
    text: str
    complexity_tier: ComplexityTier
    template_category: str


class ExampleSentence(BaseModel):
    """
    Externally visible result of one pipeline call.
    """

    model_config = ConfigDict(frozen=True)

    english: str = Field(min_length=1)
    translated: str
    source: str
