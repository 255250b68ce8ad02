# topmark:header:start
#
#   project      : CallSpacing
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the unified diff helpers."""

from __future__ import annotations

from callspacing.utils.diff import render_patch, unified_diff


def test_unified_diff_of_equal_texts_is_empty() -> None:
    assert unified_diff("foo();\n", "foo();\n", "a.js") == []


def test_unified_diff_headers_and_hunk() -> None:
    lines = unified_diff("foo ();\nbar();\n", "foo();\nbar();\n", "a.js")
    assert lines[0] == "--- a.js (original)\n"
    assert lines[1] == "+++ a.js (fixed)\n"
    assert lines[2].startswith("@@")
    assert "-foo ();\n" in lines
    assert "+foo();\n" in lines
    assert " bar();\n" in lines


def test_unified_diff_without_trailing_newline() -> None:
    """Every diff line ends with a newline, even for an unterminated last line."""
    lines = unified_diff("foo ()", "foo()", "a.js")
    assert all(line.endswith("\n") for line in lines)
    assert "-foo ()\n" in lines


def test_render_patch_plain() -> None:
    patch = ["--- a\n", "+++ b\n", "@@ -1 +1 @@\n", "-foo ();\r\n", "+foo();\r\n"]
    assert render_patch(patch, color=False) == (
        "--- a\n+++ b\n@@ -1 +1 @@\n-foo ();\n+foo();\n"
    )


def test_render_patch_line_numbers() -> None:
    rendered = render_patch("-a\n+b\n", show_line_numbers=True, color=False)
    assert rendered == "0001|-a\n0002|+b\n"


def test_render_patch_marks_bare_carriage_return() -> None:
    assert render_patch(["-a\rb\n"], color=False) == "-a\\rb\n"
