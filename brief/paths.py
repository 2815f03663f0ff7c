"""
Output file naming and staleness checks.
"""

from pathlib import Path


def derive_file_path(file_path: Path | str, new_ext: str) -> Path:
    """
    Return the path of a sibling file with a different extension.

    Example:
        >>> derive_file_path("/letters/job.brf", "tex")
        PosixPath('/letters/job.tex')
    """
    if not new_ext.startswith("."):
        new_ext = "." + new_ext
    return Path(file_path).with_suffix(new_ext)


def is_newer_than(file1: Path | str, file2: Path | str) -> bool:
    """
    Check whether file1 was modified after file2.

    Returns True if file2 does not exist (also when neither exists) and
    False if only file1 is missing.
    """
    path1, path2 = Path(file1), Path(file2)
    try:
        mtime2 = path2.stat().st_mtime
    except OSError:
        return True

    try:
        mtime1 = path1.stat().st_mtime
    except OSError:
        return False

    return mtime1 > mtime2
