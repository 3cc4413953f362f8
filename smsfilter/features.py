"""Text-to-feature transform: lowercase unigram bag-of-words counts."""

from dataclasses import dataclass
from typing import Tuple

from sklearn.feature_extraction.text import CountVectorizer

# tokens are maximal runs of word characters, so text splits on \W
WORD_TOKEN = r"(?u)[^\W]+"


@dataclass(frozen=True)
class VectorizerConfig:
    lowercase: bool = True
    tokenizer: str = "unigram"
    token_pattern: str = WORD_TOKEN
    ngram_range: Tuple[int, int] = (1, 1)

    def __post_init__(self):
        if self.tokenizer != "unigram" or tuple(self.ngram_range) != (1, 1):
            raise ValueError("only unigram tokenization is supported")


def build_vectorizer(config: VectorizerConfig = None) -> CountVectorizer:
    config = config or VectorizerConfig()
    return CountVectorizer(
        lowercase=config.lowercase,
        token_pattern=config.token_pattern,
        ngram_range=tuple(config.ngram_range),
    )

