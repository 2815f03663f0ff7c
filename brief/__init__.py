"""
Brief - Letters from Plain Text

Turns .brf letter sources into LaTeX documents. Sections of the source
are filled into a TeX template, sender details come from an address
file, and rich-text markup (markdown, asciidoc, ...) inside the letter
body is converted to LaTeX by external converters such as pandoc.
"""

__version__ = "1.0.0"
