import pytest

from smsfilter.data import as_dataset

TRAIN_LINES = [
    "spam\tWIN money now",
    "spam\tFree prize, claim now!",
    "spam\tURGENT you have won a free ticket call now",
    "ham\tlet's meet for lunch",
    "ham\tare you coming home tonight",
    "ham\tI'll call you later at home",
    "",
    "spam",
    "   ham leading whitespace",
    "junk\tnot a label we know",
]

TEST_LINES = [
    "spam\twin a free prize now",
    "ham\tmeet me at home for lunch",
]


def write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def train_file(tmp_path):
    return write_lines(tmp_path / "train.txt", TRAIN_LINES)


@pytest.fixture
def test_file(tmp_path):
    return write_lines(tmp_path / "test.txt", TEST_LINES)


@pytest.fixture
def tiny_dataset():
    return as_dataset([("spam", "win money now"), ("ham", "let's meet for lunch")])
