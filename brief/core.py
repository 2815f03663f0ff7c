"""
Brief Core Engine

Orchestrates the steps from a .brf file to a TeX file, a PDF and a
preview of it. Each step is only repeated when its input is newer than
its output.
"""

import logging
import shlex
from pathlib import Path
from typing import Optional

from .address import read_address_file
from .config import Settings
from .context import address_to_context, merge, sections_to_context
from .converters.command import run_command_line
from .converters.gateway import ConversionGateway
from .document import Document
from .errors import ConfigurationError, FormatError
from .paths import derive_file_path, is_newer_than
from .render import TemplateRenderer
from .text import single_value

logger = logging.getLogger(__name__)


class Brief:
    """
    Main brief engine.

    Takes .brf files and produces TeX files, PDFs and previews according
    to the given settings.
    """

    def __init__(self, settings: Settings, gateway: Optional[ConversionGateway] = None):
        self.settings = settings
        self.gateway = gateway or ConversionGateway.from_settings(settings)
        self.renderer = TemplateRenderer(settings.tex_template_dir)

    def build_context(self, document: Document) -> dict[str, str]:
        """
        Create the template fields for a document.

        The fields of the sender address named in the FROM section form
        the base; the sections of the document override them.

        Raises:
            FormatError: If FROM does not hold exactly one value.
            AddressFormatError: If the sender list is malformed.
            FileNotFoundError: If the sender list does not exist.
        """
        from_name = self._single_value(document, self.settings.from_section)

        senders = read_address_file(self.settings.sender_list)
        sender = senders.get(from_name)
        if sender is None:
            logger.warning(f"Sender {from_name} not found in {self.settings.sender_list}")

        content = sections_to_context(
            document.sections,
            self.gateway,
            content_section=self.settings.content_section,
        )
        return merge(address_to_context(sender), content)

    def tex(self, brf_file: Path | str) -> Path:
        """
        Convert a .brf file into a .tex file next to it.

        Returns:
            Path of the written .tex file.
        """
        brf_path = Path(brf_file)
        document = Document.from_file(brf_path)

        template_name = self._single_value(document, self.settings.template_section)
        context = self.build_context(document)
        tex_text = self.renderer.render(template_name, context)

        tex_path = derive_file_path(brf_path, "tex")
        tex_path.write_text(tex_text, encoding="utf-8")
        logger.info(f"Wrote {tex_path}")
        return tex_path

    def pdf(self, brf_file: Path | str) -> Path:
        """
        Create the PDF for a .brf file, regenerating the .tex file if needed.

        Returns:
            Path of the PDF file.
        """
        if not self.settings.pdf_command:
            raise ConfigurationError("No pdf command configured. Cannot produce pdf file.")

        brf_path = Path(brf_file)
        tex_path = derive_file_path(brf_path, "tex")
        if not is_newer_than(tex_path, brf_path):
            self.tex(brf_path)
        else:
            logger.info(f"{tex_path} is up to date")

        command_line = f"{self.settings.pdf_command} {shlex.quote(tex_path.name)}"
        run_command_line(command_line, cwd=brf_path.parent)
        return derive_file_path(brf_path, "pdf")

    def preview(self, brf_file: Path | str) -> Path:
        """
        Open the PDF of a .brf file in the preview program.

        Returns:
            Path of the previewed PDF file.
        """
        if not self.settings.preview_command:
            raise ConfigurationError("No preview command configured. Cannot open preview.")

        brf_path = Path(brf_file)
        pdf_path = derive_file_path(brf_path, "pdf")
        if not is_newer_than(pdf_path, brf_path):
            self.pdf(brf_path)
        else:
            logger.info(f"{pdf_path} is up to date")

        run_command_line(f"{self.settings.preview_command} {shlex.quote(str(pdf_path))}")
        return pdf_path

    @staticmethod
    def _single_value(document: Document, section: str) -> str:
        try:
            return single_value(document.section(section))
        except FormatError as e:
            raise FormatError(f"Invalid .{section} in {document.source}: {e}") from e
