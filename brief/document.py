"""
Reading .brf sources and splitting them into sections.

A .brf file is a flat list of lines. A line like ``.FROM`` (a dot followed
by upper case letters) starts a new section; everything up to the next
such line belongs to it.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import FormatError

logger = logging.getLogger(__name__)

# A line starting a new section, e.g. ".CONTENT"
SECTION_MARKER = re.compile(r"^\.([A-Z]+)\s*$")


def read_lines(file_path: Path | str) -> list[str]:
    """
    Read a UTF-8 text file into a list of lines without line terminators.

    Raises:
        FileNotFoundError: If the file does not exist.
        FormatError: If the file is not valid UTF-8.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        raise FormatError(f"{path} is not a UTF-8 text file: {e}") from e


def split_sections(lines, source: str = "<lines>") -> dict[str, tuple[str, ...]]:
    """
    Split lines into named sections.

    Each section holds the lines after its marker up to the next marker
    or the end of input. Lines before the first marker are dropped. If a
    section name occurs twice, the later one wins.

    Args:
        lines: The lines of a .brf file.
        source: Name of the source, used in log messages.

    Returns:
        Mapping from section name to its lines, in order of appearance.
    """
    lines = tuple(lines)
    sections: dict[str, tuple[str, ...]] = {}

    current: Optional[str] = None
    start = -1
    for idx, line in enumerate(lines):
        match = SECTION_MARKER.match(line)
        if not match:
            continue

        if current is not None:
            _store_section(sections, current, lines[start + 1:idx], source)
        else:
            dropped = sum(1 for l in lines[:idx] if l.strip())
            if dropped:
                logger.warning(
                    f"{source}: ignoring {dropped} line(s) before the first section"
                )
        current = match.group(1)
        start = idx

    # the remainder belongs to the last section
    if current is not None:
        _store_section(sections, current, lines[start + 1:], source)
    elif any(l.strip() for l in lines):
        logger.warning(f"{source}: no section markers found, ignoring all content")

    return sections


def _store_section(sections: dict, name: str, content: tuple, source: str) -> None:
    if name in sections:
        logger.warning(f"{source}: section .{name} defined more than once, using the last one")
    sections[name] = content


@dataclass(frozen=True)
class Document:
    """
    The content of a .brf file: all of its lines and the sections they form.
    """
    lines: tuple[str, ...]
    sections: dict[str, tuple[str, ...]] = field(default_factory=dict)
    source: str = "<lines>"

    @classmethod
    def from_lines(cls, lines, source: str = "<lines>") -> "Document":
        lines = tuple(lines)
        return cls(lines=lines, sections=split_sections(lines, source), source=source)

    @classmethod
    def from_file(cls, file_path: Path | str) -> "Document":
        """
        Read and split a .brf file.

        Raises:
            FileNotFoundError: If the file does not exist.
            FormatError: If the file is not valid UTF-8.
        """
        lines = read_lines(file_path)
        logger.debug(f"Read {len(lines)} lines from {file_path}")
        return cls.from_lines(lines, source=str(file_path))

    def section(self, name: str) -> tuple[str, ...]:
        """Return the lines of a section, or an empty tuple if it is missing."""
        return self.sections.get(name, ())
