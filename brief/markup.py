"""
Markup blocks inside the letter body.

The body can either be written entirely in one markup language:

    .CONTENT
    .markdown
    Some *markdown* text.

or mix literal LaTeX with delimited markup blocks:

    .CONTENT
    literal line
    .markdown--
    Some *markdown* text.
    --
    literal line

Markup is converted to LaTeX through a ConversionGateway. If conversion
fails the markup is kept as it is, so the problem shows up in the output
instead of stopping the letter from being built.
"""

import logging
import re

from .converters.gateway import ConversionGateway
from .errors import ConversionError
from .text import trim_edges

logger = logging.getLogger(__name__)

# A line declaring the markup language of the whole section, e.g. ".markdown"
SECTION_MARKUP = re.compile(r"^\.([a-z]+)\s*$")
# A line starting a markup block, e.g. ".markdown--"
BLOCK_START = re.compile(r"^\.([a-z]+)-{2,}\s*$")
# A line ending a markup block
BLOCK_END = re.compile(r"^-{2,}\s*$")

SEPARATOR = "\n"


def convert_section(lines, gateway: ConversionGateway) -> str:
    """
    Convert the lines of a section into a single LaTeX string.

    If the first line with content declares a markup type, the rest of
    the section is converted as a whole. Otherwise markup blocks are
    converted one by one and literal lines are kept.
    """
    lines = trim_edges(lines)
    if not lines:
        return ""

    match = SECTION_MARKUP.match(lines[0])
    if not match:
        return convert_blocks(lines, gateway)

    markup_type = match.group(1)
    try:
        return gateway.convert(markup_type, lines[1:])
    except ConversionError as e:
        logger.warning(f"Cannot convert markup {markup_type}. Leaving as is. {e}")
        return SEPARATOR.join(lines)


def convert_blocks(lines, gateway: ConversionGateway) -> str:
    """
    Join lines with newlines, converting any markup blocks on the way.

    Every piece (a literal line or the output of one block) is followed
    by a newline. A block without an end marker is not a block: it and
    everything after it is kept literally.
    """
    lines = list(lines)
    pieces = []

    i = 0
    while i < len(lines):
        match = BLOCK_START.match(lines[i])
        if not match:
            pieces.append(lines[i])
            i += 1
            continue

        end = _find_block_end(lines, i + 1)
        if end == -1:
            logger.warning(f"Markup block .{match.group(1)}-- is never closed. Leaving as is.")
            pieces.append(SEPARATOR.join(lines[i:]))
            break

        pieces.append(_convert_block(match.group(1), lines[i:end + 1], gateway))
        i = end + 1

    return "".join(piece + SEPARATOR for piece in pieces)


def _find_block_end(lines: list[str], start: int) -> int:
    for idx in range(start, len(lines)):
        if BLOCK_END.match(lines[idx]):
            return idx
    return -1


def _convert_block(markup_type: str, block: list[str], gateway: ConversionGateway) -> str:
    """Convert a block given with both of its delimiter lines."""
    inner = block[1:-1]
    if not inner:
        return ""

    try:
        return gateway.convert(markup_type, inner)
    except ConversionError as e:
        logger.warning(f"Cannot convert markup {markup_type}. Leaving as is. {e}")
        return SEPARATOR.join(block)
