import pytest

from candidates import CandidateGenerator
from edits import dl_distance


@pytest.fixture
def generator():
    return CandidateGenerator(["the", "cat", "sat", "conditions", "a", "an", "at"])


def test_finds_transposition(generator):
    # Levenshtein distance 2, DL distance 1
    assert "the" in generator.similar_words("teh")
    assert "the" in generator.similar_words("hte")


def test_small_vocabulary():
    generator = CandidateGenerator({"the", "cat", "sat"})
    assert generator.similar_words("teh") == {"teh", "the"}


def test_includes_the_word_itself(generator):
    assert "cat" in generator.similar_words("cat")
    # out of vocabulary words are their own candidate too
    assert "conitions" in generator.similar_words("conitions")


def test_neighbours(generator):
    assert generator.similar_words("cat") == {"cat", "sat", "at"}
    assert generator.similar_words("conitions") == {"conitions", "conditions"}


@pytest.mark.parametrize("word", ["teh", "cat", "a", "tha", "xyz", "ta", "conitions", "condtiions"])
def test_same_as_filtering_whole_vocabulary(generator, word):
    expected = {w for w in generator.vocab if dl_distance(word, w) <= 1} | {word}
    assert generator.similar_words(word) == expected


def test_results_are_cached(generator):
    first = generator.similar_words("teh")
    assert generator.similar_words("teh") is first
    assert generator.cache_info().hits == 1


def test_cache_is_bounded():
    generator = CandidateGenerator(["the", "cat", "sat"], cache_size=2)
    for word in ["teh", "cta", "sta", "hte"]:
        generator.similar_words(word)
    assert generator.cache_info().currsize == 2
    # evicted words are recomputed with the same answer
    assert generator.similar_words("teh") == {"teh", "the"}


def test_empty_vocabulary():
    assert CandidateGenerator([]).similar_words("teh") == {"teh"}
