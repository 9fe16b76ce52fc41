from pathlib import Path

import pytest

from channel import ConfusionMatrix
from corpus import read_confusion_counts, read_ngram_counts, read_vocabulary
from lm import SmoothedNGramLanguageModel
from spell import SpellCorrector

DATA = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return DATA


@pytest.fixture(scope="session")
def lm() -> SmoothedNGramLanguageModel:
    return SmoothedNGramLanguageModel(
        read_ngram_counts(DATA / "samplecnt.txt"),
        read_vocabulary(DATA / "samplevoc.txt"),
    )


@pytest.fixture(scope="session")
def confusion() -> ConfusionMatrix:
    return ConfusionMatrix(read_confusion_counts(DATA / "confusion_matrix.txt"))


@pytest.fixture
def corrector(lm, confusion) -> SpellCorrector:
    return SpellCorrector(lm, confusion)
