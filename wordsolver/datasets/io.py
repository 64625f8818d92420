"""
Word list files: one word per line, UTF-8.

Blank lines and lines starting with '#' are ignored when reading, so lists
can carry a short header describing where they came from.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

COMMENT_PREFIX = "#"


def read_word_file(p: Path | str) -> List[str]:
    """
    Read the words from a word list file, in file order.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    words = []
    for ln in p.read_text(encoding="utf-8").splitlines():
        ln = ln.strip()
        if ln and not ln.startswith(COMMENT_PREFIX):
            words.append(ln)
    return words


def write_word_file(words: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line, with a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{w}\n" for w in words), encoding="utf-8")
    return str(p)
