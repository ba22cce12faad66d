import logging
import re
from typing import FrozenSet, List, Optional

from .lexicon import CONNECTOR_WORDS, semantic_vocabulary

logger = logging.getLogger(__name__)

_PUNCT = re.compile(r"[^\w\s]")


class UnmappedWordsError(ValueError):
    """Raised when a sentence holds tokens outside the vocabulary and connector set."""

    def __init__(self, words: List[str]):
        self.words = list(words)
        super().__init__(f"Sentence contains unmapped words: {', '.join(self.words)}")


def clean_text(t: str) -> str:
    if not t:
        return ""
    t = t.strip()
    t = t.replace("—", " ")
    t = t.replace("\u00a0", " ")  # non-breaking spaces
    return " ".join(t.split())  # collapse multiple spaces


def tokenize(sentence: str) -> List[str]:
    """Lowercase, strip punctuation and split on whitespace."""
    return _PUNCT.sub("", clean_text(sentence).lower()).split()


def extract_path(sentence: str, vocabulary: Optional[FrozenSet[str]] = None) -> List[str]:
    """
    Ordered semantic words of a sentence.

    Connector words and unknown tokens are dropped; repeated semantic words
    are kept, one entry per occurrence.
    """
    vocab = semantic_vocabulary() if vocabulary is None else vocabulary
    return [tok for tok in tokenize(sentence) if tok in vocab]


def find_unmapped(sentence: str, vocabulary: Optional[FrozenSet[str]] = None) -> List[str]:
    """Tokens that are neither semantic words nor connectors, first occurrence order."""
    vocab = semantic_vocabulary() if vocabulary is None else vocabulary
    seen = set()
    out = []
    for tok in tokenize(sentence):
        if tok in vocab or tok in CONNECTOR_WORDS or tok in seen:
            continue
        seen.add(tok)
        out.append(tok)
    return out


def validate_sentence(sentence: str, vocabulary: Optional[FrozenSet[str]] = None) -> str:
    """
    Accept a sentence only if every token is known.

    Returns the cleaned sentence. Raises UnmappedWordsError listing the
    offending tokens, or ValueError for an empty sentence.
    """
    cleaned = clean_text(sentence)
    if not tokenize(cleaned):
        raise ValueError("Sentence is empty")
    unmapped = find_unmapped(cleaned, vocabulary)
    if unmapped:
        logger.info(f"Rejected sentence '{cleaned}': unmapped {unmapped}")
        raise UnmappedWordsError(unmapped)
    return cleaned
