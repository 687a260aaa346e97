import pytest

from domain.examples.word_categorizer import categorize, is_plural_word, normalize_category


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cat", "animal"),
        ("  Cat ", "animal"),
        ("glasses", "eyewear"),
        ("top", "clothing"),
        ("teddy bear", "toy"),
        ("pink teddy", "toy"),
        ("bear", "animal"),
        ("scissors", "tool"),
        ("necklace", "jewelry"),
        ("underwear", "uncountable_clothing"),
        ("clothing", "uncountable_clothing"),
        ("teacher", "person"),
    ],
)
def test_categorize_tables_and_overrides(word, expected):
    assert categorize(word) == expected


def test_categorize_plural_words_use_sub_lists():
    assert categorize("pliers") == "tool"
    assert categorize("spectacles") == "eyewear"
    assert categorize("overalls") == "clothing"
    assert categorize("headphones") == "noun"


def test_categorize_suffix_heuristics():
    assert categorize("swimming") == "verb"
    # agent nouns built on a known verb stem
    assert categorize("runner") == "person"
    assert categorize("dancer") == "person"
    assert categorize("bigger") == "adjective"
    assert categorize("smallest") == "adjective"


def test_categorize_suffix_lookalikes_stay_nouns():
    for word in ("computer", "paper", "forest", "ceiling"):
        assert categorize(word) == "noun"


def test_categorize_is_total():
    assert categorize("") == "noun"
    assert categorize("zzz") == "noun"
    assert categorize("sing") == "noun"  # -ing too short to be a verb form


def test_is_plural_word():
    assert is_plural_word("Glasses")
    assert not is_plural_word("glass")
    assert is_plural_word("reading glasses")
    assert is_plural_word("Running  Shoes")
    assert is_plural_word("shoes")
    assert not is_plural_word("wine glass")
    assert not is_plural_word("school bus")
    assert not is_plural_word("teddy bear")


def test_normalize_category_aliases_and_unknown():
    assert normalize_category("tools") == "tool"
    assert normalize_category("toys") == "toy"
    assert normalize_category("uncountable-clothing") == "uncountable_clothing"
    assert normalize_category(" Animal ") == "animal"
    assert normalize_category("spaceship") is None
    assert normalize_category(None) is None
    assert normalize_category("") is None
