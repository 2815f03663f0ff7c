"""
Exception hierarchy for the brief pipeline.
"""


class BriefError(Exception):
    """Base class for all errors raised by brief."""
    pass


class FormatError(BriefError):
    """Raised when a source file or a field in it is malformed."""
    pass


class AddressFormatError(FormatError):
    """Raised when an address file cannot be parsed."""
    pass


class ConversionError(BriefError):
    """Raised when markup cannot be converted to LaTeX."""
    pass


class CommandError(BriefError):
    """Raised when an external command cannot be run or fails."""
    pass


class TemplateError(BriefError):
    """Raised when a TeX template cannot be loaded or rendered."""
    pass


class ConfigurationError(BriefError):
    """Raised when a required setting is missing."""
    pass
