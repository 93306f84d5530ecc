from collections import Counter
from dataclasses import dataclass
from typing import List
import unicodedata


def normalize(text: str) -> str:
    """Reduce `text` to lowercase ASCII.

    Characters are decomposed first (NFD) so accented letters keep their base letter
    and lose the combining mark, e.g. "Élève" becomes "eleve".

    Args:
        text (`String`) - a dictionary word or a phrase typed by the user
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if c.isascii()).lower().strip()


@dataclass()
class Fragment:
    """A phrase, normalized, along with the words and letters that make it up. The
    letters ignore whitespace, which only separates words.

    Args:
        phrase (`String`) - a phrase, a single word or a bare run of letters
    """

    def __init__(self, phrase: str):
        self.words: List[str] = normalize(phrase).split()
        self.sentence = " ".join(self.words)
        self.letters = Counter("".join(self.words))


def letter_pool(phrase: str, hint: str = "") -> Counter:
    """Compute the letters left to arrange once the hint has been placed.

    Each letter of the hint consumes one matching letter of the phrase. Hint letters
    with nothing left to match are ignored.

    Args:
        phrase (`String`) - the phrase to find anagrams of
        hint (`String`) - words known to be part of the answer
    """
    return Fragment(phrase).letters - Fragment(hint).letters
