from typing import Dict, Iterable, Iterator, List, Tuple


def canonical_key(words: Iterable[str]) -> Tuple[str, ...]:
    """The words of a sentence in alphabetical order. Two sentences share a key iff
    they use the same words, whatever their order."""
    return tuple(sorted(words))


class ResultSet:
    """Sentences found during a search, at most one per set of words.

    The first sentence seen for a key is kept and later ones are dropped. Sentences
    are stored with their words sorted.
    """

    def __init__(self):
        self.data: Dict[Tuple[str, ...], List[str]] = {}

    def add(self, words: Iterable[str]) -> bool:
        """Record a sentence, returns whether it was new"""
        key = canonical_key(words)
        if key in self.data:
            return False
        self.data[key] = list(key)
        return True

    def __contains__(self, words: Iterable[str]) -> bool:
        return canonical_key(words) in self.data

    def __iter__(self) -> Iterator[List[str]]:
        return iter(self.data.values())

    def __len__(self) -> int:
        return len(self.data)


def rank(sentences: Iterable[Iterable[str]]) -> List[str]:
    """Join each sentence into a line and order the lines by word count, longest
    first. Lines with the same word count are sorted alphabetically.
    """
    lines = set(" ".join(words) for words in sentences)
    return sorted(lines, key=lambda line: (-line.count(" "), line))


def render(lines: Iterable[str], hint: str = "") -> List[str]:
    hint = " ".join(hint.lower().split())
    if not hint:
        return list(lines)
    return [f"{hint} {line}" for line in lines]
