import pytest

from codewarrior.vowelharmony import dative


@pytest.mark.parametrize(
    "word, expected",
    [
        ("ablak", "ablaknak"),
        ("tükör", "tükörnek"),
        ("keret", "keretnek"),
        ("otthon", "otthonnak"),
        ("virág", "virágnak"),
        ("tett", "tettnek"),
        ("rokkant", "rokkantnak"),
        ("rossz", "rossznak"),
    ],
)
def test_fixed_cases(word, expected):
    assert dative(word) == expected


@pytest.mark.parametrize("word", "terv kérvény vény kép hit tök őr füst űr".split())
def test_front_vowel_words(word):
    assert dative(word) == word + "nek"


@pytest.mark.parametrize("word", "rag tár kár zár gondnok mór mókus úr".split())
def test_back_vowel_words(word):
    assert dative(word) == word + "nak"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("kalap", "kalapnak"),
        ("ház", "háznak"),
        ("tűz", "tűznek"),
        ("víz", "víznek"),
        ("ember", "embernek"),
        ("üveg", "üvegnek"),
        ("pohár", "pohárnak"),
        ("gödör", "gödörnek"),
        ("csűr", "csűrnek"),
        ("lakás", "lakásnak"),
    ],
)
def test_mixed_words_use_last_vowel(word, expected):
    assert dative(word) == expected


@pytest.mark.parametrize("word", ["", "brr", "xyz"])
def test_word_without_vowel_raises(word):
    with pytest.raises(ValueError, match="invalid word"):
        dative(word)