"""
Settings - configuration for the brief tool

Values come from (highest priority first) keyword arguments, BRIEF_*
environment variables, a .env file in the working directory and the
defaults below. Defaults for external programs depend on what is
installed on the current system.

Example:
    BRIEF_PDF_COMMAND=latexmk
    BRIEF_MARKUP_CONVERTERS='{"markdown": "pandoc -f markdown -t latex"}'
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "brief"

DEFAULT_PDF_COMMANDS = ["latexrun", "latexmk", "lualatex", "xelatex", "pdflatex"]
DEFAULT_PREVIEW_COMMANDS = [
    "mupdf", "zathura", "katarakt", "evince", "okular",
    "qpdfview", "skim", "SumatraPDF", "xpdf",
]


def find_executable(candidates) -> Optional[str]:
    """
    Return the first candidate that can be found on the PATH.

    Candidates starting with "$" name an environment variable holding the
    executable, e.g. "$EDITOR".
    """
    for candidate in candidates:
        name = os.environ.get(candidate[1:], "") if candidate.startswith("$") else candidate
        if name and shutil.which(name):
            return name
    return None


def find_default_markup_converters() -> dict[str, str]:
    """
    Find converters for markup sections.

    asciidoc is converted via asciidoctor (or asciidoc) and pandoc, all
    other markup directly via pandoc.
    """
    converters = {}
    found = {name: shutil.which(name) for name in ("asciidoctor", "asciidoc", "pandoc")}

    if found["pandoc"]:
        if found["asciidoctor"]:
            converters["asciidoc"] = "asciidoctor -b docbook5 - | pandoc -f docbook -t latex"
        elif found["asciidoc"]:
            converters["asciidoc"] = "asciidoc -b docbook5 - | pandoc -f docbook -t latex"
        if "asciidoc" in converters:
            converters["adoc"] = converters["asciidoc"]
        converters["*"] = "pandoc -f %m -t latex"
    else:
        logger.info("pandoc not found - markup will not be converted")

    return converters


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="BRIEF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Files ==========
    tex_template_dir: Path = CONFIG_DIR / "tex-templates"
    sender_list: Path = CONFIG_DIR / "sender-list"

    # ========== External programs ==========
    pdf_command: str = Field(default_factory=lambda: find_executable(DEFAULT_PDF_COMMANDS) or "")
    preview_command: str = Field(default_factory=lambda: find_executable(DEFAULT_PREVIEW_COMMANDS) or "")
    # Markup type (or "*") -> command line reading markup on stdin, writing LaTeX
    markup_converters: dict[str, str] = Field(default_factory=find_default_markup_converters)

    # ========== Document ==========
    content_section: str = "CONTENT"
    template_section: str = "TEMPLATE"
    from_section: str = "FROM"

    # ========== Logging ==========
    log_level: str = "WARNING"


def load_settings(**overrides) -> Settings:
    """
    Create Settings, reporting unusable values as ConfigurationError.

    Raises:
        ConfigurationError: If an environment variable, the .env file or
            an override holds a value that cannot be parsed.
    """
    try:
        return Settings(**overrides)
    except (SettingsError, ValidationError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
