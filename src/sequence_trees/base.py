from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple
import logging

from sequence_trees.logging_config import get_logger

# Get logger for this module
logger = get_logger("SequenceTree")


class SequenceEntry:
    """
    A recognition sequence together with the enzyme acronyms that cut it.

    Attributes:
        key (str): The recognition sequence; fixed for the entry's lifetime.
        tags (List[str]): Enzyme acronyms in the order they were merged in.
    """
    __slots__ = ("_key", "tags")

    def __init__(self, key: str, tags: Optional[Iterable[str]] = None):
        if not isinstance(key, str):
            raise TypeError(f"SequenceEntry(): key must be a str, got {type(key).__name__}")
        self._key = key
        if tags is None:
            self.tags: List[str] = []
        elif isinstance(tags, str):
            self.tags = [tags]
        else:
            self.tags = list(tags)

    @property
    def key(self) -> str:
        return self._key

    def merge(self, other: "SequenceEntry") -> None:
        """
        Append every tag of ``other`` to this entry, keeping ``other``'s order.

        Assumes ``other.key == self.key``; ``other`` is left untouched.
        """
        self.tags.extend(other.tags)

    def copy(self) -> "SequenceEntry":
        return SequenceEntry(self._key, self.tags)

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(key={self._key!r}, tags={self.tags!r})"

    def __str__(self) -> str:
        return " ".join([self._key, *self.tags])


class TreeNode:
    """A binary tree node owning its entry and both child subtrees."""
    __slots__ = ("entry", "left", "right", "height")

    def __init__(
        self,
        entry: SequenceEntry,
        left: Optional["TreeNode"] = None,
        right: Optional["TreeNode"] = None,
    ) -> None:
        self.entry = entry
        self.left = left
        self.right = right
        self.height = 1

    @property
    def key(self) -> str:
        return self.entry.key

    def __repr__(self) -> str:
        return f"TreeNode(key={self.entry.key!r}, height={self.height})"


class AbstractSequenceTree(ABC):
    """
    Abstract base class for ordered containers of sequence entries.
    """
    __slots__ = ()

    @abstractmethod
    def insert(self, entry: SequenceEntry) -> None:
        """
        Insert an entry, merging its tags into an existing entry with the same key.

        Parameters:
            entry (SequenceEntry): The entry to be inserted.
        """

    @abstractmethod
    def find(self, key: str) -> Tuple[bool, int]:
        """
        Search for a key.

        Parameters:
            key (str): The recognition sequence to look up.

        Returns:
            Tuple[bool, int]: ``(found, steps)`` where ``steps`` is the number
            of nodes compared along the search path.
        """

    @abstractmethod
    def remove(self, key: str) -> Tuple[bool, int]:
        """
        Remove the node holding ``key``.

        Parameters:
            key (str): The recognition sequence to remove.

        Returns:
            Tuple[bool, int]: ``(removed, steps)`` where ``steps`` counts the
            nodes compared while locating the target.
        """


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
