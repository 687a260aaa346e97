import pytest

from domain.examples.quality_filters import (
    QualityFilterPipeline,
    accepts,
    basic_quality,
    contains_word,
    has_conflicting_form,
    locate_word,
    suits_learner,
)


def test_glasses_with_reading_context_is_accepted():
    assert accepts("He needs new glasses to read.", "glasses", "eyewear")


def test_glass_inside_glasses_is_rejected():
    text = "She wore stylish glasses."
    assert not accepts(text, "glass", "eyewear")
    assert has_conflicting_form(text, "glass")


def test_glass_to_glasses_is_allowed_with_vision_cue():
    assert not has_conflicting_form("She needs glass and glasses to read.", "glass")


def test_bear_as_verb_is_rejected_by_context():
    pipeline = QualityFilterPipeline()
    text = "The company must bear the cost of repairs."
    assert pipeline.first_rejection(text, "bear", "animal") == "inappropriate context"
    assert not pipeline.accepts(text, "bear", "animal")


def test_bear_as_animal_is_accepted():
    assert accepts("The brown bear walked slowly through the forest.", "bear", "animal")


@pytest.mark.parametrize(
    "text",
    [
        "Cat sat.",  # too short
        "The cat sat on the mat; the dog slept.",
        "This is an example of a cat in a sentence.",
        "Note: the cat sat on the mat.",
        "See also the cat on the mat.",
        "Read about the cat at www.example.com today.",
        "The cat sat on the mat (Smith 1999).",
        "A cat is a type of animal with fur.",
        "The cat sat on the mat",
        "The old cat will die soon, sadly.",
    ],
)
def test_basic_quality_rejections(text):
    assert not basic_quality(text, "cat")


def test_inappropriate_words_match_whole_words_only():
    assert basic_quality("She studied the cat all day long.", "cat")


def test_exact_word_presence_single_token():
    assert contains_word("The Cat sat down.", "cat")
    assert not contains_word("The category is wide.", "cat")


def test_exact_word_presence_multi_token():
    assert contains_word("I bought a new teddy bear today.", "teddy bear")
    assert contains_word("I bought a new teddy-bear today.", "teddy bear")
    # technical prefix: the head noun alone is enough
    assert contains_word("He scanned the barcode quickly.", "2d barcode")
    # load-bearing last token longer than three chars
    assert contains_word("The bear was asleep.", "teddy bear")
    assert not contains_word("The teddy was asleep.", "teddy bear")


def test_locate_word_returns_first_index():
    assert locate_word("A cat and a cat.", "cat") == 2
    assert locate_word("No match here.", "cat") is None


def test_compound_and_variant_forms_are_conflicts():
    assert has_conflicting_form("The category of this cat is clear.", "cat")
    assert has_conflicting_form("The cats are sleeping on the sofa.", "cat")
    assert has_conflicting_form("He was running to the shop.", "run")
    assert not has_conflicting_form("The cat is sleeping on the sofa.", "cat")


def test_short_words_skip_substring_check():
    # "ox" inside "box" is not treated as a compound
    assert not has_conflicting_form("The ox stood by the box.", "ox")


def test_person_objectifying_verb_nearby_is_rejected():
    pipeline = QualityFilterPipeline()
    text = "They sold the teacher an old car."
    assert pipeline.first_rejection(text, "teacher", "person") == "inappropriate context"
    assert accepts("The teacher explained the lesson to the whole class.", "teacher", "person")


def test_top_as_position_is_rejected():
    assert not accepts("She reached the top of the mountain.", "top", "clothing")
    assert accepts("She wore a new silk top to the party.", "top", "clothing")


def test_scissors_rule_is_lenient():
    # no cutting cue, but no sports cue either
    assert accepts("My scissors are in the kitchen drawer.", "scissors", "tool")
    assert not accepts("He landed a perfect scissors kick at the game.", "scissors", "tool")


def test_suits_learner_rejects_late_word_and_long_vocabulary():
    assert not suits_learner("The cat sat.", "cat")
    assert not suits_learner(
        "Yesterday after a very long day at work I finally saw a cat.", "cat"
    )
    assert not suits_learner(
        "The cat observed extraordinary philosophical considerations.", "cat"
    )
    assert suits_learner("The cat sat quietly on the warm mat.", "cat")


def test_accepts_is_pure():
    text = "He needs new glasses to read."
    results = {accepts(text, "glasses", "eyewear") for _ in range(5)}
    assert results == {True}


def test_custom_stage_list():
    pipeline = QualityFilterPipeline(stages=[("always", lambda t, w, c: False)])
    assert pipeline.first_rejection("Anything at all.", "x") == "always"
