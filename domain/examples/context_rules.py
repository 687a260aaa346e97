from typing import Optional

from pydantic import BaseModel, ConfigDict

###########################################################
# Context cues for ambiguous words and categories.
#
# A rule passes a sentence when:
#   - strict (default): some required cue is present AND no forbidden cue is
#   - lenient: some required cue is present OR no forbidden cue is
# An empty required list counts as "present".
# Cues match at a word start ("animal" also matches "animals").
# forbidden_patterns are regexes that reject on any match.
# forbidden_near rejects a cue found within near_window characters of the word.
#
# Word rules win over category rules. Categories without a rule pass.
###########################################################


class ContextRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    required_any: tuple[str, ...] = ()
    forbidden_any: tuple[str, ...] = ()
    forbidden_patterns: tuple[str, ...] = ()
    forbidden_near: tuple[str, ...] = ()
    near_window: int = 15
    lenient: bool = False


_ACADEMIC = (
    "research", "scientific", "theory", "journal", "symposium", "academ",
    "philosophical", "scholarly", "dissertation", "publication",
)

WORD_RULES: dict[str, ContextRule] = {
    "bear": ContextRule(
        required_any=(
            "zoo", "animal", "wild", "fur", "cub", "paw", "den", "forest",
            "grizzly", "polar", "pet", "wildlife", "nature", "honey", "cave",
        ),
        forbidden_any=(
            "burden", "weight", "load", "responsibilit", "stand", "support",
            "carry", "bore", "market", "stock", "bear with", "bear in mind",
            "cost", "fruit", "witness", "resemblance",
        )
        + _ACADEMIC,
    ),
    "teddy bear": ContextRule(
        required_any=(
            "child", "play", "toy", "soft", "cuddl", "sleep", "bed", "hug",
            "stuffed", "plush", "gift", "favorite", "favourite", "baby", "kid",
            "comfort",
        ),
        forbidden_any=_ACADEMIC + ("values", "societal", "cognitive", "development"),
    ),
    "top": ContextRule(
        required_any=(
            "wear", "wore", "worn", "shirt", "outfit", "fashion", "dress",
            "color", "colour", "style", "clothes", "wardrobe", "buy", "bought",
            "new", "fabric", "cotton", "silk", "button", "sleeve", "collar",
            "blouse",
        ),
        forbidden_any=(
            "mountain", "hill", "climb", "reached", "leadership", "ranked",
            "ceiling", "position", "over", "above", "surface", "highest",
            "best", "leading", "foremost", "premier", "superior", "chief",
        ),
        forbidden_patterns=(
            r"\btop of\b", r"\bspinning top\b", r"\btop[\s-]?notch\b",
            r"\bon top\b", r"\btop (?:lawyer|student|priority)\b",
        ),
    ),
    "chair": ContextRule(
        forbidden_patterns=(
            r"\b(?:will|to) chair\b",
            r"\bchair(?:ing|ed|s)?\s+(?:a|the|this|that)\s+(?:meeting|session|committee)\b",
            r"\bwas chaired\b",
            r"\bfirst chair\b",
        ),
    ),
    "keyboard": ContextRule(forbidden_patterns=(r"\bkeyboarding\b",)),
    "scissors": ContextRule(
        required_any=("cut", "paper", "fabric", "hair", "sharp", "blade", "trim"),
        forbidden_any=("executed", "perfect", "jump", "kick", "position", "technique", "sport"),
        lenient=True,
    ),
}

CATEGORY_RULES: dict[str, ContextRule] = {
    "eyewear": ContextRule(
        required_any=(
            "see", "vision", "read", "eye", "wear", "wore", "sight",
            "prescription", "lens", "optician", "frame", "optometrist",
            "sunglasses",
        ),
        forbidden_any=(
            "fill", "empty", "drink", "beverage", "water", "wine", "window",
            "fiber", "fibre", "cup", "mug", "liquid", "pour",
        ),
        lenient=True,
    ),
    "jewelry": ContextRule(
        required_any=(
            "wear", "wore", "worn", "gold", "silver", "diamond", "gem", "stone",
            "gift", "beautiful", "elegant", "accessor", "decorated", "adorned",
        ),
    ),
    "clothing": ContextRule(
        required_any=(
            "wear", "wore", "worn", "fashion", "style", "outfit", "dressed",
            "clothes", "wardrobe", "fabric", "color", "colour", "comfortable",
            "fit", "size",
        ),
    ),
    "uncountable_clothing": ContextRule(
        required_any=(
            "wear", "wore", "worn", "fashion", "style", "outfit", "dressed",
            "clothes", "wardrobe", "fabric", "color", "colour", "comfortable",
            "fit", "size",
        ),
    ),
    "person": ContextRule(
        forbidden_near=(
            "use", "using", "used", "utilize", "buy", "bought", "sell", "sold",
            "cost", "price", "cheap", "expensive", "owned",
        ),
    ),
}


def rule_for(word: str, category: Optional[str]) -> Optional[ContextRule]:
    word = " ".join(word.lower().split())
    if word in WORD_RULES:
        return WORD_RULES[word]
    if "teddy" in word:
        return WORD_RULES["teddy bear"]
    if category:
        return CATEGORY_RULES.get(category)
    return None
