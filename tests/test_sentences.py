# tests/test_sentences.py
import pytest

from semantic_sphere.sentences import (
    UnmappedWordsError,
    clean_text,
    extract_path,
    find_unmapped,
    tokenize,
    validate_sentence,
)


def test_tokenize_strips_punctuation_and_case():
    assert tokenize("  The Stone, became SAND!  ") == ["the", "stone", "became", "sand"]
    assert tokenize("") == []


def test_clean_text():
    assert clean_text("stone  became   sand") == "stone became sand"
    assert clean_text("stone—sand") == "stone sand"
    assert clean_text(None) == ""


def test_path_drops_connectors():
    assert extract_path("The stone became sand") == ["stone", "sand"]


def test_path_keeps_order_and_repeats():
    assert extract_path("sand became stone became sand") == ["sand", "stone", "sand"]


def test_path_drops_unknown_tokens():
    assert extract_path("the stone became glorp") == ["stone"]


def test_custom_vocabulary():
    assert extract_path("the stone became sand", frozenset({"sand"})) == ["sand"]


def test_find_unmapped():
    assert find_unmapped("The stone became sand") == []
    assert find_unmapped("The glorp became glorp and zib") == ["glorp", "zib"]


def test_validate_accepts_known_sentence():
    assert validate_sentence("  The stone   became sand ") == "The stone became sand"


def test_validate_reports_unmapped_words():
    with pytest.raises(UnmappedWordsError) as exc:
        validate_sentence("The stone became a spaceship")
    assert exc.value.words == ["spaceship"]
    assert "spaceship" in str(exc.value)
    # Still a ValueError for callers that only care about rejection
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("text", ["", "   ", "?!"])
def test_validate_rejects_empty(text):
    with pytest.raises(ValueError):
        validate_sentence(text)
