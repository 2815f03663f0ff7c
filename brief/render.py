"""
Rendering TeX templates.

Templates are Jinja templates living in the template directory. Every
section of the letter and every field of the sender address is available
by name. Jinja's default delimiters collide with TeX (``{#1}``, ``{%``), so
templates use LaTeX-looking ones instead:

    \\VAR{CONTENT}            variable
    \\BLOCK{if PS}...\\BLOCK{endif}   statement
    \\#{note}                 comment
"""

import logging
from pathlib import Path
from typing import Mapping

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, TemplateSyntaxError

from .errors import TemplateError

logger = logging.getLogger(__name__)

BLOCK_START = "\\BLOCK{"
VARIABLE_START = "\\VAR{"
COMMENT_START = "\\#{"


class TemplateRenderer:
    """Renders templates from one directory."""

    def __init__(self, template_dir: Path | str):
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            block_start_string=BLOCK_START,
            block_end_string="}",
            variable_start_string=VARIABLE_START,
            variable_end_string="}",
            comment_start_string=COMMENT_START,
            comment_end_string="}",
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render(self, template_name: str, context: Mapping[str, str]) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateError: If the template does not exist or is invalid.
        """
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(
                f"Error reading tex template {self.template_dir / template_name}: not found"
            ) from e
        except TemplateSyntaxError as e:
            raise TemplateError(
                f"Error reading tex template {self.template_dir / template_name}: {e}"
            ) from e

        logger.debug(f"Rendering {template.filename} with {len(context)} fields")
        return template.render(**context)
