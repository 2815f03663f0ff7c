"""
Markup Conversion Gateway

Maps a markup type name (``markdown``, ``asciidoc``, ...) to a converter
and runs it. Converters are configured as command lines that read markup
on stdin and write LaTeX to stdout. A ``*`` entry is used for every type
without an entry of its own; ``%m`` in its command line is replaced with
the markup type, e.g. ``pandoc -f %m -t latex``.
"""

import logging
from typing import Callable, Mapping, Union

from ..errors import CommandError, ConversionError
from .command import run_command_line

logger = logging.getLogger(__name__)

WILDCARD = "*"
MARKUP_TYPE_PLACEHOLDER = "%m"

# An in-process converter: takes the markup lines, returns LaTeX
ConverterFunc = Callable[[list[str]], str]
ConverterSpec = Union[str, ConverterFunc]


class CommandConverter:
    """Converts markup by piping it through an external command line."""

    def __init__(self, markup_type: str, command_line: str):
        self.markup_type = markup_type
        self.command_line = command_line

    def __call__(self, lines: list[str]) -> str:
        if not self.command_line.strip():
            raise ConversionError(f"No command defined for markup {self.markup_type}")

        stdin = "\n".join(lines) + "\n"
        try:
            return run_command_line(self.command_line, input_text=stdin)
        except CommandError as e:
            raise ConversionError(
                f"Error converting {self.markup_type} markup via {self.command_line}: {e}"
            ) from e

    def __repr__(self) -> str:
        return f"CommandConverter({self.markup_type!r}, {self.command_line!r})"


class ConversionGateway:
    """
    Registry of markup converters.

    The registry is fixed at construction time. Entries are either command
    lines or callables taking the list of markup lines. Empty entries are
    treated as missing.

    Only command lines learn the markup type, through ``%m``. A callable
    registered as ``*`` gets the lines alone and is used unchanged for
    every type, so it has to be type-agnostic.
    """

    def __init__(self, converters: Mapping[str, ConverterSpec] = None):
        self.converters = dict(converters or {})

    @classmethod
    def from_settings(cls, settings) -> "ConversionGateway":
        """Create a gateway from the markup_converters of a Settings object."""
        return cls(settings.markup_converters)

    def resolve(self, markup_type: str) -> ConverterFunc:
        """
        Find the converter for a markup type.

        Raises:
            ConversionError: If neither an entry for the type nor a
                wildcard entry is configured.
        """
        spec = self.converters.get(markup_type)
        if spec:
            return self._to_converter(markup_type, spec)

        spec = self.converters.get(WILDCARD)
        if spec:
            if isinstance(spec, str):
                spec = spec.replace(MARKUP_TYPE_PLACEHOLDER, markup_type)
            return self._to_converter(markup_type, spec)

        raise ConversionError(
            f"No converter configured for markup type {markup_type}. "
            f"Consider installing pandoc."
        )

    def convert(self, markup_type: str, lines) -> str:
        """
        Convert markup lines to LaTeX.

        Raises:
            ConversionError: If no converter is configured or it fails.
        """
        converter = self.resolve(markup_type)
        logger.debug(f"Converting {markup_type} markup with {converter!r}")
        try:
            return converter(list(lines))
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(f"Error converting {markup_type} markup: {e}") from e

    @staticmethod
    def _to_converter(markup_type: str, spec: ConverterSpec) -> ConverterFunc:
        if isinstance(spec, str):
            return CommandConverter(markup_type, spec)
        return spec
