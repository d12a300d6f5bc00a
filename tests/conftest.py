"""Test setup for when-present."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from when_present.builder import build_forest  # noqa: E402
from when_present.line_source import iter_logical_lines  # noqa: E402
from when_present.schemas import Forest  # noqa: E402

# Lines 2-12 form a three-way chain with a nested group in the #elif branch.
PLATFORM_SOURCE = """\
#include <stdio.h>
#ifdef _WIN32
#  define SEP ';'
#elif defined(__APPLE__)
#  if TARGET_OS_IPHONE
int ios;
#  else
int mac;
#  endif
#else
int other;
#endif
int tail;
"""


@pytest.fixture
def build() -> Callable[[str], Forest]:
    """Build a forest from source text."""

    def _build(text: str) -> Forest:
        return build_forest(iter_logical_lines(io.StringIO(text, newline="\n")))

    return _build


@pytest.fixture
def platform_forest(build: Callable[[str], Forest]) -> Forest:
    """Forest for PLATFORM_SOURCE."""
    return build(PLATFORM_SOURCE)


@pytest.fixture
def platform_file(tmp_path: Path) -> Path:
    """PLATFORM_SOURCE written to disk."""
    path = tmp_path / "platform.c"
    path.write_text(PLATFORM_SOURCE)
    return path
