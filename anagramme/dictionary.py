import logging
from os import PathLike
from pathlib import Path
from typing import Dict, Iterable, Union

from anagramme.fragment import normalize

logger = logging.getLogger(__name__)


class DictionaryError(Exception):
    """The dictionary file could not be found, read or decoded."""


class Node:
    __slots__ = ("children", "terminal")

    def __init__(self):
        self.children: Dict[str, "Node"] = {}
        self.terminal = False


class Dictionary:
    """A set of normalized words stored in a prefix tree.

    Exact lookups and prefix lookups both walk one node per character of the query,
    so their cost does not depend on the number of words indexed. The dictionary is
    filled once and only read afterwards.

    Args:
        words (`Iterable[String]`) - raw words, normalized before they are indexed
    """

    def __init__(self, words: Iterable[str] = ()):
        self.root = Node()
        self.word_count = 0
        for word in words:
            self.add(word)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Dictionary":
        """Build a dictionary from the lines of a word list, one word per line"""
        return cls(lines)

    def add(self, word: str) -> None:
        word = normalize(word)
        if word == "":
            return
        node = self.root
        for letter in word:
            node = node.children.setdefault(letter, Node())
        if not node.terminal:
            node.terminal = True
            self.word_count += 1

    def _walk(self, letters: str) -> Union[Node, None]:
        node = self.root
        for letter in letters:
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.terminal

    def has_prefix(self, prefix: str) -> bool:
        """Answers whether `prefix` is a dictionary word or the start of one."""
        node = self._walk(prefix)
        return node is not None and (node.terminal or len(node.children) > 0)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self.word_count


def dictionary_path(resource_dir: Union[str, PathLike[str]], language: str) -> Path:
    return Path(resource_dir) / f"{language.lower()}.txt"


def load(resource_dir: Union[str, PathLike[str]], language: str) -> Dictionary:
    """Load the word list for `language` from `resource_dir`.

    Args:
        resource_dir (`PathLike`) - the directory holding the `<language>.txt` files
        language (`String`) - a language code, e.g. "fr"

    Raises:
        DictionaryError: If the file is missing, unreadable or not valid UTF-8
    """
    path = dictionary_path(resource_dir, language)
    try:
        with open(path, encoding="utf-8") as stream:
            dictionary = Dictionary.from_lines(stream)
    except FileNotFoundError as err:
        raise DictionaryError(f"no dictionary found at {path}") from err
    except UnicodeDecodeError as err:
        raise DictionaryError(f"{path} is not valid UTF-8: {err.reason}") from err
    except OSError as err:
        raise DictionaryError(f"unable to read {path}: {err.strerror}") from err
    logger.info(f"loaded dictionary {path} ({len(dictionary)} words)")
    return dictionary
