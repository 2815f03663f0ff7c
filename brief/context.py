"""
Building the rendering context handed to the TeX template.
"""

import logging
from typing import Mapping, Optional

from .address import AddressRecord
from .converters.gateway import ConversionGateway
from .markup import convert_section
from .text import escape_special, join_hard_breaks, trim_edges

logger = logging.getLogger(__name__)

CONTENT_SECTION = "CONTENT"


def merge(base: Mapping[str, str], override: Mapping[str, str]) -> dict[str, str]:
    """
    Combine two mappings into a new one.

    Keys present in both get the value from override. Neither input is
    modified.
    """
    merged = dict(base)
    merged.update(override)
    return merged


def address_to_context(record: Optional[AddressRecord]) -> dict[str, str]:
    """Turn an address into template fields, one LaTeX line per value."""
    if record is None:
        return {}
    return {
        key: escape_special(join_hard_breaks(values))
        for key, values in record.fields.items()
    }


def sections_to_context(
    sections: Mapping[str, tuple[str, ...]],
    gateway: ConversionGateway,
    content_section: str = CONTENT_SECTION,
) -> dict[str, str]:
    """
    Turn the sections of a document into template fields.

    The content section may contain markup and goes through the markup
    conversion. All other sections are plain multi-line fields whose
    lines are joined with LaTeX line breaks.
    """
    context = {}
    for name, lines in sections.items():
        if name == content_section:
            value = convert_section(lines, gateway)
        else:
            value = join_hard_breaks(trim_edges(lines))
        context[name] = escape_special(value)
        logger.debug(f"Section {name}: {len(value)} characters")
    return context
