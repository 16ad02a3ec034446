import re
from typing import FrozenSet, Iterator


STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "and", "for", "with", "from", "this", "that", "have", "has",
    "not", "but", "you", "are", "was", "were", "will", "can", "into",
    "onto", "over", "under", "between", "a", "an", "of", "to", "in",
    "on", "at", "by", "is", "it", "as", "be", "or",
})

MIN_WORD_LENGTH = 3

# Anything that is not an ASCII letter separates words
WORD_SEPARATOR_RE = re.compile(r"[^a-zA-Z]+")


def get_valid_words(message: str) -> Iterator[str]:
    """
    Yield the lowercased words of a message that are worth counting.

    Words shorter than MIN_WORD_LENGTH and stop words are dropped.
    Duplicates are kept; counting is the caller's job.
    """
    for token in WORD_SEPARATOR_RE.split(message):
        word = token.lower()
        if len(word) < MIN_WORD_LENGTH or word in STOP_WORDS:
            continue
        yield word
