"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from brief.config import Settings
from brief.converters.gateway import ConversionGateway
from tests.fixtures import (
    SAMPLE_LETTER,
    SAMPLE_SENDER_LIST,
    SAMPLE_TEMPLATE,
    upper_converter,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "external: mark as running external programs")


# ============================================================================
# Converter Fixtures
# ============================================================================


@pytest.fixture
def empty_gateway():
    """A gateway without any converters."""
    return ConversionGateway({})


@pytest.fixture
def upper_gateway():
    """A gateway that converts markdown by upper-casing it."""
    return ConversionGateway({"markdown": upper_converter})


@pytest.fixture
def recording_gateway():
    """A gateway that records every call and returns a marker string."""
    calls = []

    def convert(lines):
        calls.append(lines)
        return "<converted>\n"

    gateway = ConversionGateway({"*": convert})
    gateway.calls = calls
    return gateway


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def template_dir(tmp_path):
    """A template directory holding letter.tex."""
    path = tmp_path / "templates"
    path.mkdir()
    (path / "letter.tex").write_text(SAMPLE_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def sender_list(tmp_path):
    """A sender list with two addresses."""
    path = tmp_path / "sender-list"
    path.write_text(SAMPLE_SENDER_LIST, encoding="utf-8")
    return path


@pytest.fixture
def letter_file(tmp_path):
    """A .brf letter using letter.tex and the 'work' sender."""
    path = tmp_path / "letter.brf"
    path.write_text(SAMPLE_LETTER, encoding="utf-8")
    return path


@pytest.fixture
def settings(template_dir, sender_list):
    """Settings pointing to the temporary files, without external programs."""
    return Settings(
        tex_template_dir=template_dir,
        sender_list=sender_list,
        pdf_command="",
        preview_command="",
        markup_converters={},
    )
