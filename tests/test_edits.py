import pytest

from edits import NO_EDIT, Edit, dl_distance, get_correction

WORDS = ["", "a", "the", "hte", "teh", "cat", "sat", "conitions", "conditions", "kitten", "sitting"]


class TestDLDistance:

    @pytest.mark.parametrize("word", WORDS)
    def test_identity_is_zero(self, word):
        assert dl_distance(word, word) == 0

    def test_symmetric(self):
        for a in WORDS:
            for b in WORDS:
                assert dl_distance(a, b) == dl_distance(b, a)

    @pytest.mark.parametrize("a, b, expected", [
        ("", "abc", 3),
        ("abc", "", 3),
        ("teh", "the", 1),          # transposition
        ("hte", "the", 1),
        ("cat", "sat", 1),          # substitution
        ("conitions", "conditions", 1),
        ("thee", "the", 1),         # deletion
        ("kitten", "sitting", 3),
        ("ca", "abc", 3),           # no edits on a transposed pair
    ])
    def test_known_distances(self, a, b, expected):
        assert dl_distance(a, b) == expected


class TestGetCorrection:

    def test_transposition_at_start(self):
        edit = get_correction("hte", "the")
        assert edit == Edit("transposition", "ht", "th")
        assert edit.key == "ht|th"

    def test_transposition_at_end(self):
        assert get_correction("teh", "the").key == "eh|he"

    def test_substitution(self):
        edit = get_correction("cat", "bat")
        assert edit.kind == "substitution"
        assert edit.key == "c|b"

    def test_substitution_last_letter(self):
        assert get_correction("thi", "the").key == "i|e"

    def test_insertion(self):
        # "conitions" is "conditions" with the d left out
        edit = get_correction("conitions", "conditions")
        assert edit.kind == "insertion"
        assert edit.key == "n|nd"

    def test_insertion_at_word_boundary(self):
        assert get_correction("he", "the").key == " | t"

    def test_insertion_at_end(self):
        edit = get_correction("th", "the")
        assert edit.kind == "insertion"
        assert edit.key == "h|he"

    def test_deletion_at_end(self):
        edit = get_correction("thee", "the")
        assert edit.kind == "deletion"
        assert edit.key == "ee|e"

    def test_deletion_in_middle(self):
        assert get_correction("tzhe", "the").key == "tz|t"

    def test_identical_words(self):
        assert get_correction("the", "the") is NO_EDIT
        assert NO_EDIT.key == ""
