"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from number_words.languages import get_language, supported_codes  # noqa: E402


@pytest.fixture(params=supported_codes())
def language(request):
    """Every registered language, one test run each."""
    return get_language(request.param)
