"""
Helpers for normalizing section lines into LaTeX-ready strings.
"""

from .errors import FormatError

# Forces a line break in LaTeX
HARD_LINE_BREAK = "\\\\\n"

# Characters with a special meaning in LaTeX, replaced in a single pass
_SPECIAL_CHARS = str.maketrans({
    "\u202f": r"\,",        # narrow no-break space -> thin space
    "_": r"\string_",
    "^": r"\string^",
})


def trim_edges(lines) -> list[str]:
    """
    Remove leading and trailing blank lines.

    Blank lines between content lines are kept as they are. If no line
    has content, an empty list is returned.
    """
    lines = list(lines)
    content_idx = [idx for idx, line in enumerate(lines) if line.strip()]
    if not content_idx:
        return []
    return lines[content_idx[0]:content_idx[-1] + 1]


def single_value(lines) -> str:
    """
    Return the only line with content, stripped of surrounding whitespace.

    Raises:
        FormatError: If there is no line with content, or more than one.
    """
    trimmed = trim_edges(lines)
    if not trimmed:
        raise FormatError("No line with content found")
    if len(trimmed) > 1:
        raise FormatError(f"Multiple values found: {trimmed!r}")
    return trimmed[0].strip()


def join_hard_breaks(lines) -> str:
    """Join lines so that each one ends up on its own line in LaTeX."""
    return HARD_LINE_BREAK.join(lines)


def escape_special(text: str) -> str:
    """Replace characters that LaTeX would otherwise interpret."""
    return text.translate(_SPECIAL_CHARS)
