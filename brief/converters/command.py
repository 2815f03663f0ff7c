"""
Running external command lines.

Command lines are written the way a shell user would write them, e.g.
``asciidoctor -b docbook5 - | pandoc -f docbook -t latex``. Quotes group
words containing whitespace and an unquoted ``|`` pipes the output of
one command into the next.
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Optional

from ..errors import CommandError

logger = logging.getLogger(__name__)


def split_pipeline(command_line: str) -> list[list[str]]:
    """
    Tokenize a command line into the argument lists of its pipe stages.

    Example:
        >>> split_pipeline("cat 'my file' | wc -l")
        [['cat', 'my file'], ['wc', '-l']]
    """
    lexer = shlex.shlex(command_line, posix=True, punctuation_chars="|")
    lexer.whitespace_split = True
    lexer.commenters = ""

    stages = []
    current: list[str] = []
    for token in lexer:
        if token == "|":
            if current:
                stages.append(current)
            current = []
        else:
            current.append(token)
    if current:
        stages.append(current)
    return stages


def run_command_line(
    command_line: str,
    input_text: Optional[str] = None,
    cwd: Optional[Path | str] = None,
) -> str:
    """
    Run a command line and return what its last stage wrote to stdout.

    Pipe stages run one after another; the complete stdout of a stage is
    the stdin of the next one. There is no timeout.

    Args:
        command_line: The command line to execute.
        input_text: Text written to stdin of the first stage.
        cwd: Working directory for all stages. Defaults to the current one.

    Returns:
        The decoded stdout of the last stage.

    Raises:
        CommandError: If the command line is empty, an executable cannot
            be started, or a stage exits with a non-zero status.
    """
    try:
        stages = split_pipeline(command_line)
    except ValueError as e:
        raise CommandError(f"Cannot parse command line {command_line!r}: {e}") from e
    if not stages:
        raise CommandError("Empty command line")

    data = input_text.encode("utf-8") if input_text is not None else None
    for argv in stages:
        logger.debug(f"Running {argv}")
        try:
            result = subprocess.run(
                argv,
                input=data,
                stdin=subprocess.DEVNULL if data is None else None,
                capture_output=True,
                cwd=cwd,
            )
        except OSError as e:
            raise CommandError(f"Error executing {command_line!r}: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise CommandError(
                f"Error executing {command_line!r}: {argv[0]} exited with "
                f"status {result.returncode}" + (f": {stderr}" if stderr else "")
            )
        data = result.stdout

    return data.decode("utf-8", errors="replace")
