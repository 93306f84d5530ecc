from collections import Counter
import logging
import time
from typing import Generator, List, Tuple, Union

from anagramme.dictionary import Dictionary
from anagramme.fragment import Fragment, letter_pool
from anagramme.results import ResultSet, rank

logger = logging.getLogger(__name__)


BOUNDARY_FACTOR = 6
"""one extra word is allowed for every BOUNDARY_FACTOR letters to arrange"""

Frame = Tuple[Counter, str, Tuple[int, ...]]


def max_boundaries_for(letter_count: int, factor: int = BOUNDARY_FACTOR) -> int:
    return letter_count // factor + 1


def last_word(prefix: str, boundaries: Tuple[int, ...]) -> str:
    """The letters of `prefix` placed after the last word boundary"""
    if not boundaries:
        return prefix
    return prefix[boundaries[-1] :]


def split_sentence(prefix: str, boundaries: Tuple[int, ...]) -> List[str]:
    words = []
    start = 0
    for boundary in boundaries:
        words.append(prefix[start:boundary])
        start = boundary
    words.append(prefix[start:])
    return words


class Solver:
    def __init__(
        self,
        phrase: str,
        dictionary: Dictionary,
        hint: str = "",
        max_boundaries: Union[int, None] = None,
        max_nodes: Union[int, None] = None,
        max_time: Union[float, None] = None,
    ):
        self.dictionary = dictionary
        self.hint = hint
        self.letter_bank = letter_pool(phrase, hint)
        if max_boundaries is None:
            max_boundaries = max_boundaries_for(self.letter_bank.total())
        self.max_boundaries = max_boundaries
        self.max_nodes = max_nodes
        self.max_time = max_time

        self.nodes_visited = 0
        self.truncated = False

    def solve(self) -> List[str]:
        """Find every anagram sentence of the letter bank.

        Returns:
            The sentences as space-joined lines, one per set of words, sorted by
            descending word count
        """
        start_time = time.time()
        logger.info(
            "searching %d letters (%s), at most %d words",
            self.letter_bank.total(),
            "".join(sorted(self.letter_bank.elements())),
            self.max_boundaries + 1,
        )
        results = ResultSet()
        for words in self.search():
            if results.add(words):
                logger.info(f"--> {' '.join(sorted(words))}")
        logger.info(
            "found %d sentences, visited %d nodes in %.2f seconds",
            len(results),
            self.nodes_visited,
            time.time() - start_time,
        )
        return rank(results)

    def search(self) -> Generator[List[str], None, None]:
        """Lazily generate the candidate sentences of the letter bank.

        Search is depth first. Every frame places one more letter after the prefix
        built so far, trying each distinct remaining letter once. A branch is dropped
        as soon as the word being built is not the start of any dictionary word. When
        that word is itself in the dictionary the branch forks: one child keeps
        growing the word, the other closes it and starts a new one, as long as the
        sentence is under `max_boundaries` boundaries.

        The same sentence may be generated more than once when different orders of
        the same words are found. Deduplication is left to the caller.

        Returns:
            a generator of word lists, in the order the words were placed
        """
        self.nodes_visited = 0
        self.truncated = False
        if self.letter_bank.total() == 0:
            return

        start_time = time.time()
        stack: List[Frame] = [(self.letter_bank, "", ())]
        while stack:
            if self.max_nodes is not None and self.nodes_visited >= self.max_nodes:
                logger.warning(
                    "Visited %d nodes, stopping. Results are incomplete.",
                    self.max_nodes,
                )
                self.truncated = True
                return
            if self.max_time is not None and (time.time() - start_time) > self.max_time:
                logger.warning(
                    "Timeout after %s seconds, stopping. Results are incomplete.",
                    self.max_time,
                )
                self.truncated = True
                return

            remaining, prefix, boundaries = stack.pop()
            self.nodes_visited += 1

            if remaining.total() == 0:
                if self.dictionary.contains(last_word(prefix, boundaries)):
                    yield split_sentence(prefix, boundaries)
                continue

            # pushed in reverse so that letters are explored in alphabetical order
            for letter in sorted(remaining, reverse=True):
                extended = prefix + letter
                current_word = last_word(extended, boundaries)
                if not self.dictionary.has_prefix(current_word):
                    continue

                rest = remaining.copy()
                rest[letter] -= 1
                if rest[letter] == 0:
                    del rest[letter]

                if (
                    self.dictionary.contains(current_word)
                    and len(boundaries) < self.max_boundaries
                ):
                    stack.append((rest.copy(), extended, boundaries + (len(extended),)))
                stack.append((rest, extended, boundaries))

    def soft_validate(self, candidate: str) -> bool:
        """Answers whether the words placed so far could still lead to an anagram
        sentence of the letter bank.

        The last word may be unfinished, so it only has to start a dictionary word.
        Every other word must be in the dictionary, and no letter may be used more
        often than the letter bank allows.

        Args:
            candidate (str): a partial arrangement of letters
        """
        placed = Fragment(candidate)
        if not placed.letters <= self.letter_bank:
            return False  # candidate uses letters not in the bank
        if len(placed.words) > self.max_boundaries + 1:
            return False
        if any(not self.dictionary.contains(w) for w in placed.words[:-1]):
            return False
        if placed.words and not self.dictionary.has_prefix(placed.words[-1]):
            return False
        return True

    def hard_validate(self, candidate: str) -> bool:
        """Answers whether `candidate` is a complete anagram sentence: it uses
        exactly the letters of the bank, only dictionary words, and no more words than
        the search allows.

        Args:
            candidate (str): a space separated sentence
        """
        placed = Fragment(candidate)
        if not placed.words:
            return False
        if placed.letters != self.letter_bank:
            return False  # placed must use exactly all the letters of the bank
        if len(placed.words) > self.max_boundaries + 1:
            return False
        return all(self.dictionary.contains(w) for w in placed.words)
