# Test fixtures
from .sample_letters import (
    SAMPLE_LETTER,
    SAMPLE_MIXED_CONTENT,
    SAMPLE_SENDER_LIST,
    SAMPLE_TEMPLATE,
    upper_converter,
)

__all__ = [
    "SAMPLE_LETTER",
    "SAMPLE_MIXED_CONTENT",
    "SAMPLE_SENDER_LIST",
    "SAMPLE_TEMPLATE",
    "upper_converter",
]
