import pytest

from storymatch.matching import normalize_title


def test_lowercases_and_strips_punctuation():
    assert normalize_title("Hello, World!") == "hello world"
    assert normalize_title("Test: Article (2024)") == "test article 2024"


def test_collapses_whitespace_and_trims():
    assert normalize_title("  Too   many \t spaces\n here  ") == "too many spaces here"


@pytest.mark.parametrize(
    "variant,canonical",
    [
        ("Haemorrhage", "Hemorrhage"),
        ("Paediatric anaemia", "Pediatric anemia"),
        ("Caesarean delivery outcomes", "Cesarean delivery outcomes"),
        ("Randomised controlled trial", "Randomized controlled trial"),
        ("Tumour centre", "Tumor center"),
        ("Oesophageal cancer", "Esophageal cancer"),
        ("Gynaecology clinic", "Gynecology clinic"),
    ],
)
def test_spelling_variants_normalize_identically(variant, canonical):
    assert normalize_title(variant) == normalize_title(canonical)


def test_combined_planned_caesarean_is_split():
    title = "Postpartum Haemorrhage at PlannedCaesarean Delivery"
    assert normalize_title(title) == "postpartum hemorrhage at planned cesarean delivery"
    assert normalize_title(title) == normalize_title("Postpartum Hemorrhage at Planned Cesarean Delivery")


def test_substitutions_are_whole_word():
    assert normalize_title("Centres of excellence") == "centres of excellence"
    assert normalize_title("Labourer rights") == "labourer rights"


@pytest.mark.parametrize(
    "text",
    [
        "Effects of Prophylactic Oxytocin on Postpartum Haemorrhage at PlannedCaesarean Delivery",
        "  ¿Qué pasa?  Breaking -- news!!! ",
        "Hospitalisation rates (2023): a randomised, standardised review",
        "",
        "a",
    ],
)
def test_normalization_is_idempotent(text):
    once = normalize_title(text)
    assert normalize_title(once) == once


def test_missing_text_is_empty():
    assert normalize_title(None) == ""
    assert normalize_title("") == ""
    assert normalize_title("?!...") == ""
