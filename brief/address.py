"""
Parser for address files.

An address file holds any number of named addresses:

    # comment
    address: work
    fromName: Jane Doe
    fromAddress: Some Street 1
    fromAddress: 12345 Some Town

A field may be given several times; its values are kept in order (e.g.
for multi-line postal addresses).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .document import read_lines
from .errors import AddressFormatError

logger = logging.getLogger(__name__)

ADDRESS_KEY = "address:"


@dataclass
class AddressRecord:
    """A single named address with multi-valued fields."""
    name: str
    fields: dict[str, list[str]] = field(default_factory=dict)

    def add(self, key: str, value: str) -> None:
        self.fields.setdefault(key, []).append(value)

    def get(self, key: str) -> list[str]:
        """Return all values of a field (empty if it is not set)."""
        return list(self.fields.get(key, []))


def parse_address_lines(lines, source: str = "<lines>") -> dict[str, AddressRecord]:
    """
    Parse the lines of an address file.

    Args:
        lines: The lines of the address file.
        source: Name of the source, used in error messages.

    Returns:
        Mapping from address name to AddressRecord, in file order.

    Raises:
        AddressFormatError: If a field appears before the first
            "address:" line or a line is not of the form "key: value".
    """
    records: dict[str, AddressRecord] = {}
    current = None

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith(ADDRESS_KEY):
            name = line[len(ADDRESS_KEY):].strip()
            if name in records:
                logger.warning(f"{source}: address {name} defined more than once, using the last one")
            current = AddressRecord(name=name)
            records[name] = current
            continue

        if current is None:
            raise AddressFormatError(
                f"Invalid address file {source}. Content without 'address:' "
                f"in line {lineno}: {raw}"
            )

        key, sep, value = line.partition(":")
        if not sep:
            raise AddressFormatError(f"Invalid line {lineno} in address file {source}: {raw}")
        current.add(key.strip(), value.strip())

    return records


def read_address_file(file_path: Path | str) -> dict[str, AddressRecord]:
    """
    Read and parse an address file.

    Raises:
        FileNotFoundError: If the file does not exist.
        AddressFormatError: If the file is malformed.
    """
    records = parse_address_lines(read_lines(file_path), source=str(file_path))
    logger.debug(f"Read {len(records)} address(es) from {file_path}")
    return records
