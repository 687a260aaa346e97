from typing import Optional

from domain.examples.schemas.schema import WordCategory

###########################################################
# Word -> semantic category.
#
# Resolution order:
# 1. explicit overrides for ambiguous words
# 2. exact membership in the category tables
# 3. containment of known compound names (e.g. "teddy bear")
# 4. typically-plural words routed by sub-list
# 5. suffix heuristics (-ing, -er, -est)
# 6. default: noun
###########################################################

CATEGORY_WORDS: dict[str, frozenset[str]] = {
    "person": frozenset(
        {
            "person", "man", "woman", "boy", "girl", "child", "baby", "teacher",
            "doctor", "student", "friend", "neighbor", "parent", "mother",
            "father", "employee", "worker", "artist", "musician", "writer",
            "chef", "athlete", "scientist", "engineer", "nurse", "lawyer",
            "pilot", "driver", "manager", "designer", "developer", "actor",
            "farmer", "police officer", "firefighter",
        }
    ),
    "animal": frozenset(
        {
            "dog", "cat", "bird", "fish", "horse", "cow", "elephant", "lion",
            "tiger", "bear", "rabbit", "monkey", "mouse", "frog", "snake",
            "wolf", "fox", "deer", "giraffe", "zebra", "penguin", "eagle", "owl",
            "turtle", "dolphin", "whale", "shark", "chicken", "duck", "goose",
            "sheep", "pig", "squirrel", "butterfly", "bee", "spider",
        }
    ),
    "clothing": frozenset(
        {
            "shirt", "pants", "dress", "jacket", "coat", "hat", "gloves", "socks",
            "shoes", "boots", "sweater", "skirt", "jeans", "top", "scarf", "tie",
            "blouse", "suit", "belt", "vest", "hoodie", "shorts", "pajamas",
            "uniform", "t-shirt", "sandals", "sneakers", "heels", "cap",
            "beanie", "mittens", "trousers", "tights", "leggings",
        }
    ),
    "uncountable_clothing": frozenset(
        {
            "clothing", "outerwear", "underwear", "sportswear", "footwear",
            "swimwear", "knitwear", "loungewear", "sleepwear", "activewear",
            "winterwear", "beachwear", "formalwear", "casualwear", "workwear",
        }
    ),
    "eyewear": frozenset(
        {
            "glasses", "sunglasses", "contacts", "goggles", "spectacles",
            "eyeglasses", "shades", "reading glasses", "bifocals",
            "prescription glasses", "monocle",
        }
    ),
    "jewelry": frozenset(
        {
            "necklace", "ring", "bracelet", "earrings", "watch", "pendant",
            "brooch", "pin", "chain", "locket", "anklet", "cufflinks", "tiara",
            "crown", "medallion", "choker", "bangle", "charm bracelet", "amulet",
        }
    ),
    "tool": frozenset(
        {
            "scissors", "knife", "hammer", "screwdriver", "wrench", "pliers",
            "saw", "drill", "tape measure", "level", "chisel", "clamp", "ruler",
            "axe", "shovel", "rake", "trowel", "sander", "nail gun", "paintbrush",
            "file", "grinder", "soldering iron", "multitool", "crowbar",
        }
    ),
    "toy": frozenset(
        {
            "teddy bear", "doll", "ball", "blocks", "action figure", "puzzle",
            "toy car", "stuffed animal", "plush toy", "game", "toy", "robot",
            "kite", "yo-yo", "train set", "board game", "video game", "rattle",
            "building set", "puppet", "play set", "model kit", "lego", "frisbee",
        }
    ),
}

# Overrides beat every other rule.
CATEGORY_OVERRIDES: dict[str, WordCategory] = {
    "top": "clothing",
    "glasses": "eyewear",
    "teddy bear": "toy",
    "teddy": "toy",
    "clothing": "uncountable_clothing",
    "bear": "animal",
    "watch": "jewelry",
}

# Substrings that pin a multi-word name to a category.
COMPOUND_MARKERS: tuple[tuple[str, WordCategory], ...] = (
    ("teddy", "toy"),
    ("toy ", "toy"),
    ("sunglasses", "eyewear"),
    ("glasses", "eyewear"),
)

PLURAL_WORDS = frozenset(
    {
        "glasses", "pants", "shorts", "jeans", "scissors", "trousers",
        "sunglasses", "goggles", "spectacles", "eyeglasses", "headphones",
        "tights", "leggings", "pliers", "binoculars", "tweezers", "pajamas",
        "overalls", "trunks", "boxers", "briefs", "clippers", "shears",
        "earrings", "earbuds", "shoes", "boots", "socks", "gloves", "sandals",
        "sneakers", "heels", "mittens",
    }
)
PLURAL_TOOLS = frozenset({"scissors", "pliers", "clippers", "shears", "tweezers"})
PLURAL_EYEWEAR = frozenset({"glasses", "sunglasses", "spectacles", "eyeglasses", "goggles"})
PLURAL_CLOTHING = frozenset(
    {"pants", "shorts", "jeans", "trousers", "tights", "leggings", "pajamas", "overalls"}
)

# Verb stems whose -er form names the agent ("teacher", "runner").
AGENT_VERB_STEMS = frozenset(
    {
        "teach", "work", "drive", "write", "paint", "sing", "dance", "play",
        "run", "swim", "read", "build", "bake", "climb", "jump", "walk",
        "design", "develop", "manage", "farm", "garden", "clean", "drum",
        "report", "lead", "learn", "speak", "train", "photograph", "program",
    }
)

# Ordinary nouns that only look like -ing/-er/-est forms.
SUFFIX_LOOKALIKE_NOUNS = frozenset(
    {
        "ceiling", "building", "painting", "wedding", "morning", "evening",
        "pudding", "stuffing", "string", "earring", "computer", "paper",
        "water", "letter", "number", "flower", "tower", "corner", "sticker",
        "poster", "printer", "heater", "container", "hamburger", "finger",
        "river", "winter", "summer", "butter", "ladder", "blender", "toaster",
        "sweater", "slipper", "speaker", "charger", "remote controller",
        "forest", "chest", "nest", "interest", "request", "guest", "contest",
    }
)

CATEGORY_ALIASES: dict[str, WordCategory] = {
    "tools": "tool",
    "toys": "toy",
    "uncountable-clothing": "uncountable_clothing",
    "uncountable clothing": "uncountable_clothing",
}

KNOWN_CATEGORIES = frozenset(
    {
        "person", "animal", "clothing", "uncountable_clothing", "eyewear",
        "jewelry", "tool", "toy", "verb", "adjective", "noun", "general",
    }
)


def _normalize(word: str) -> str:
    return " ".join(word.lower().split())


def _is_regular_plural(token: str) -> bool:
    # "shoes", "lights"; not "glass", "bus", "tennis"
    return len(token) > 3 and token.endswith("s") and not token.endswith(("ss", "us", "is"))


def is_plural_word(word: str) -> bool:
    """
    Plural-only words, and multi-word words whose last token is plural
    ("reading glasses", "running shoes").
    """
    word = _normalize(word)
    if word in PLURAL_WORDS:
        return True
    head, _, last = word.rpartition(" ")
    return bool(head) and (last in PLURAL_WORDS or _is_regular_plural(last))


def normalize_category(category: Optional[str]) -> Optional[WordCategory]:
    """
    Map a caller-supplied category tag to a known one.
    Returns None for empty or unknown tags so the caller can categorize instead.
    """
    if not category:
        return None
    tag = category.strip().lower()
    tag = CATEGORY_ALIASES.get(tag, tag)
    if tag in KNOWN_CATEGORIES:
        return tag  # type: ignore[return-value]
    return None


def _plural_subcategory(word: str) -> WordCategory:
    if word in PLURAL_TOOLS:
        return "tool"
    if word in PLURAL_EYEWEAR:
        return "eyewear"
    if word in PLURAL_CLOTHING:
        return "clothing"
    return "noun"


def _is_agent_noun(word: str) -> bool:
    # teacher -> teach, dancer -> dance, runner -> run
    stems = {word[:-2], word[:-1]}
    if len(word) > 4 and word[-3] == word[-4]:
        stems.add(word[:-3])
    return any(stem in AGENT_VERB_STEMS for stem in stems)


def categorize(word: str) -> WordCategory:
    """
    Total mapping from a word to its category. Never raises; defaults to "noun".
    """
    word = _normalize(word)
    if not word:
        return "noun"

    if word in CATEGORY_OVERRIDES:
        return CATEGORY_OVERRIDES[word]

    for category, words in CATEGORY_WORDS.items():
        if word in words:
            return category  # type: ignore[return-value]

    if " " in word:
        for marker, category in COMPOUND_MARKERS:
            if marker in word:
                return category

    if word in PLURAL_WORDS:
        return _plural_subcategory(word)

    if word in SUFFIX_LOOKALIKE_NOUNS:
        return "noun"

    if word.endswith("ing") and len(word) > 5:
        return "verb"

    if (word.endswith("er") or word.endswith("est")) and len(word) > 4:
        if word.endswith("er") and _is_agent_noun(word):
            return "person"
        return "adjective"

    return "noun"
