#!/usr/bin/env python3
"""
Brief CLI

Command-line interface for creating letters from .brf files.

Usage:
    brief tex letter.brf          # write letter.tex
    brief pdf letter.brf          # write letter.pdf (via tex)
    brief preview letter.brf      # open letter.pdf (via pdf)
    brief sections letter.brf     # list the sections of letter.brf

Options:
    --template-dir DIR   Directory with TeX templates
    --sender-list FILE   Address file with the sender addresses
    -v, --verbose        Log progress (repeat for debug output)
"""

import argparse
import sys

from brief import __version__
from brief.config import load_settings
from brief.core import Brief
from brief.document import Document
from brief.errors import BriefError
from brief.logging_config import setup_logger


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="brief",
        description=(
            "User friendly creation of high quality letters.\n\n"
            "Fills the sections of a .brf file into a TeX template and\n"
            "converts markup in the letter body to LaTeX."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  brief tex letter.brf\n"
            "  brief pdf letter.brf --template-dir ./templates\n"
            "  brief preview letter.brf\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Directory with TeX templates (default: ~/.config/brief/tex-templates)",
    )
    parser.add_argument(
        "--sender-list",
        default=None,
        help="Address file with sender addresses (default: ~/.config/brief/sender-list)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress; repeat for debug output",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    for name, help_text in (
        ("tex", "Convert the given <brfFile> into a tex file."),
        ("pdf", "Convert the given <brfFile> into a pdf file (via tex)."),
        ("preview", "Open a preview of the given <brfFile> (via pdf)."),
        ("sections", "List the sections of the given <brfFile>."),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("brf_file", metavar="brfFile", help="brf file to convert.")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        print("\nError: No command given.")
        sys.exit(1)

    overrides = {}
    if args.template_dir:
        overrides["tex_template_dir"] = args.template_dir
    if args.sender_list:
        overrides["sender_list"] = args.sender_list

    try:
        settings = load_settings(**overrides)
        log_level = {0: settings.log_level, 1: "INFO"}.get(args.verbose, "DEBUG")
        setup_logger("brief", level=log_level)

        if args.command == "sections":
            _show_sections(args.brf_file)
            return

        engine = Brief(settings)
        if args.command == "tex":
            out_path = engine.tex(args.brf_file)
            print(f"[TEX] {out_path}")
        elif args.command == "pdf":
            out_path = engine.pdf(args.brf_file)
            print(f"[PDF] {out_path}")
        elif args.command == "preview":
            out_path = engine.preview(args.brf_file)
            print(f"[PREVIEW] {out_path}")
    except (BriefError, OSError) as e:
        print(f"[ERROR] {args.brf_file}: {e}", file=sys.stderr)
        sys.exit(1)


def _show_sections(brf_file: str):
    """Display the sections of a .brf file."""
    document = Document.from_file(brf_file)
    print(f"\nSections in {brf_file}:")
    print("-" * 40)
    for name, lines in document.sections.items():
        print(f"  .{name:<16} {len(lines)} line(s)")
    print()


if __name__ == "__main__":
    main()
