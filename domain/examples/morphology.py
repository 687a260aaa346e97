from typing import Optional

from domain.examples.word_categorizer import is_plural_word

VOWELS = frozenset("aeiou")

# Spelled with a vowel but sounding like a consonant, and the reverse.
CONSONANT_SOUND_PREFIXES = ("uni", "use", "usu", "uten", "euro", "one", "once")
SILENT_H_PREFIXES = ("hour", "honest", "honor", "honour", "heir")

# Leading tokens that qualify a technical head noun ("2d barcode" -> "barcode").
TECHNICAL_PREFIXES = (
    "2d", "3d", "qr", "usb", "led", "lcd", "hdmi", "wi-fi", "wifi",
    "smart", "digital", "electric", "wireless", "bluetooth",
)

# Forms the suffix rules cannot derive.
IRREGULAR_VARIANTS: dict[str, tuple[str, ...]] = {
    "bear": ("bore", "borne", "bearing", "bearable", "unbearable"),
    "glasses": ("glass", "eyeglass", "fiberglass", "fibreglass"),
    "glass": ("glasses", "fiberglass", "fibreglass"),
    "top": ("topping", "topped", "topmost"),
    "mouse": ("mice",),
    "child": ("children",),
    "person": ("people",),
    "man": ("men",),
    "woman": ("women",),
    "foot": ("feet",),
    "tooth": ("teeth",),
    "goose": ("geese",),
    "knife": ("knives",),
    "wolf": ("wolves",),
    "leaf": ("leaves",),
}

IRREGULAR_PLURALS: dict[str, str] = {
    "mouse": "mice",
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "foot": "feet",
    "tooth": "teeth",
    "goose": "geese",
    "knife": "knives",
    "wolf": "wolves",
    "leaf": "leaves",
    "sheep": "sheep",
    "deer": "deer",
    "fish": "fish",
}


def is_vowel(char: str) -> bool:
    return char.lower() in VOWELS


def indefinite_article(word: str) -> str:
    """
    "a" or "an" by the sound of the first token: "an hour", "a uniform".
    """
    first = word.lower().split(" ", 1)[0]
    if first.startswith(SILENT_H_PREFIXES):
        return "an"
    if first.startswith(CONSONANT_SOUND_PREFIXES):
        return "a"
    return "an" if first and is_vowel(first[0]) else "a"


def _is_cvc(word: str) -> bool:
    # consonant-vowel-consonant ending: "stop" -> "stopping"
    return (
        len(word) >= 3
        and not is_vowel(word[-1])
        and is_vowel(word[-2])
        and not is_vowel(word[-3])
        and word[-1] not in "wxy"
    )


def technical_head(word: str) -> Optional[str]:
    """
    For "<technical prefix> <head>" words return the head, else None.
    """
    word = " ".join(word.lower().split())
    for prefix in TECHNICAL_PREFIXES:
        if word.startswith(prefix + " "):
            head = word[len(prefix) + 1 :].strip()
            return head or None
    return None


def pluralize(word: str) -> str:
    """
    English plural of the last token, good enough for template filling.
    """
    if is_plural_word(word):
        return word
    head, _, last = word.rpartition(" ")
    lower = last.lower()
    if lower in IRREGULAR_PLURALS:
        plural = IRREGULAR_PLURALS[lower]
    elif lower.endswith(("s", "x", "z", "ch", "sh")):
        plural = last + "es"
    elif lower.endswith("y") and len(lower) > 1 and not is_vowel(lower[-2]):
        plural = last[:-1] + "ies"
    else:
        plural = last + "s"
    return f"{head} {plural}" if head else plural


def generate_variants(word: str) -> set[str]:
    """
    Inflected look-alikes of a word: plural/singular flip, -ing/-ed,
    comparative/superlative and a small irregular table.
    The word itself is never included.
    """
    lower = word.lower().strip()
    variants: set[str] = set()

    # Plural / singular
    if lower.endswith("s"):
        singular = lower[:-1]
        if len(singular) > 2:
            variants.add(singular)
    else:
        variants.add(lower + "s")
        if lower.endswith("y"):
            variants.add(lower[:-1] + "ies")
        elif lower.endswith(("ch", "sh", "x", "z")):
            variants.add(lower + "es")

    # Verb forms
    variants.add(lower + "ing")
    variants.add(lower + "ed")
    if lower.endswith("e"):
        variants.add(lower[:-1] + "ing")
        variants.add(lower + "d")
    elif lower.endswith("y"):
        variants.add(lower[:-1] + "ied")
    elif _is_cvc(lower):
        variants.add(lower + lower[-1] + "ing")
        variants.add(lower + lower[-1] + "ed")

    # Adjective forms
    variants.add(lower + "er")
    variants.add(lower + "est")
    if lower.endswith("e"):
        variants.add(lower + "r")
        variants.add(lower + "st")
    elif lower.endswith("y"):
        variants.add(lower[:-1] + "ier")
        variants.add(lower[:-1] + "iest")
    elif _is_cvc(lower):
        variants.add(lower + lower[-1] + "er")
        variants.add(lower + lower[-1] + "est")

    variants.update(IRREGULAR_VARIANTS.get(lower, ()))
    variants.discard(lower)
    return {v for v in variants if len(v) > 2}
