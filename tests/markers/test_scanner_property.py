# fmtmark:header:start
#
#   project      : FmtMark
#   file         : test_scanner_property.py
#   file_relpath : tests/markers/test_scanner_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

# pyright: strict

"""Property tests for the marker scanner.

1) Source without any marker is returned as the very same object.
2) Marker-shaped text hidden in comments and string literals is never replaced.
3) Appending a blank marker adds exactly the requested line endings and keeps
   the text before it byte-for-byte.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fmtmark.markers import ReplaceStatus, replace_markers
from tests.strategies_fmtmark import s_source

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=200, deadline=None)
@given(source=s_source(), doc_blocks=st.booleans())
def test_marker_free_source_is_identity(source: str, doc_blocks: bool) -> None:
    """No marker means UNCHANGED and the input object itself."""
    result = replace_markers(source, doc_blocks)

    assert result.status is ReplaceStatus.UNCHANGED
    assert result.text is source


@settings(max_examples=200, deadline=None)
@given(source=s_source(hidden=True), doc_blocks=st.booleans())
def test_hidden_markers_are_immune(source: str, doc_blocks: bool) -> None:
    """Markers inside comments and strings are never replaced."""
    result = replace_markers(source, doc_blocks)

    assert result.status is ReplaceStatus.UNCHANGED
    assert result.text is source


@settings(max_examples=100, deadline=None)
@given(
    source=s_source(hidden=True),
    count=st.integers(min_value=0, max_value=5),
    ending=st.sampled_from(["\n", "\r\n"]),
)
def test_trailing_blank_marker_appends_line_endings(source: str, count: int, ending: str) -> None:
    """Text before a marker is copied verbatim and the marker renders `count` endings."""
    result = replace_markers(f"{source}_blank_!({count});{ending}")

    assert result.status is ReplaceStatus.REWRITTEN
    assert result.text == source + ending * count
    assert result.replacements == 1
