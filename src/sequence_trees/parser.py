"""
Reading restriction-enzyme databases into sequence trees.

Database lines look like ``Acronym/Seq1/Seq2/.../SeqN//``: the enzyme
acronym comes first and every following field is one recognition
sequence. An empty field (two ``/`` in a row) ends the record. The file
starts with a fixed-size header that is skipped.
"""
from typing import Iterable, Iterator, List, Tuple

from sequence_trees.base import SequenceEntry
from sequence_trees.logging_config import get_logger
from sequence_trees.search_tree_base import SearchTreeBase

logger = get_logger(__name__)

HEADER_LINES = 10
FIELD_SEPARATOR = "/"


def parse_database_line(line: str, line_no: int = 0) -> Tuple[str, List[str]]:
    """
    Split one database line into its acronym and recognition sequences.

    Parameters:
        line (str): A line such as ``"AanI/TTA'TAA//"``.
        line_no (int): Line number used in error messages.

    Returns:
        Tuple[str, List[str]]: ``(acronym, sequences)``.

    Raises:
        ValueError: If the line contains no separator.
    """
    line = line.strip()
    first_slash = line.find(FIELD_SEPARATOR)
    if first_slash < 0:
        raise ValueError(f"line {line_no}: expected 'Acronym/Seq/.../Seq//', got {line!r}")

    acronym = line[:first_slash]
    sequences = []
    for field in line[first_slash + 1:].split(FIELD_SEPARATOR):
        if not field:
            break
        sequences.append(field)
    return acronym, sequences


def iter_sequence_pairs(
    lines: Iterable[str], header_lines: int = HEADER_LINES
) -> Iterator[Tuple[str, str]]:
    """
    Lazily yield ``(sequence, acronym)`` pairs from database lines.

    The first ``header_lines`` lines are skipped, as are blank lines.
    """
    for line_no, line in enumerate(lines, start=1):
        if line_no <= header_lines or not line.strip():
            continue
        acronym, sequences = parse_database_line(line, line_no)
        for sequence in sequences:
            yield sequence, acronym


def fill_tree(
    tree: SearchTreeBase, lines: Iterable[str], header_lines: int = HEADER_LINES
) -> int:
    """Insert every pair from ``lines`` into ``tree``; returns the number of pairs."""
    count = 0
    tree_insert = tree.insert
    for sequence, acronym in iter_sequence_pairs(lines, header_lines):
        tree_insert(SequenceEntry(sequence, [acronym]))
        count += 1
    logger.info("Inserted %d sequence pairs into %s", count, type(tree).__name__)
    return count


def load_database(path, tree: SearchTreeBase, header_lines: int = HEADER_LINES) -> int:
    """
    Fill ``tree`` from the database file at ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path, encoding="utf-8") as f:
        return fill_tree(tree, f, header_lines)


def iter_queries(lines: Iterable[str]) -> Iterator[str]:
    """Yield each non-empty query line, stripped."""
    for line in lines:
        query = line.strip()
        if query:
            yield query
