"""Unit tests for mdmerge.api.label.normalize_label."""

import pytest

from mdmerge.api.label.normalize_label import normalize_label


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Some Section", "some-section"),
        ("Some   Section", "some-section"),
        ("Some \t Section", "some-section"),
        ("Files/Directories", "files-directories"),
        ("Files / Directories", "files-directories"),
        ("Foo - Bar", "foo-bar"),
        ("a, b", "a-b"),
        ("Version 1.2", "version-12"),
        ("`cmd_show`.py", "cmd_showpy"),
        ("Über Café", "Über-café"),
        ("  padded  ", "padded"),
        ("", ""),
    ],
)
def test_normalize_label(text, expected):
    assert normalize_label(text) == expected


@pytest.mark.parametrize(
    "text",
    ["Some Section", "Foo - Bar", "a , . b", "/leading", "x--y", "A/B-C D", "`x` , `y`", "Tabs\tand  spaces "],
)
def test_normalize_label_is_idempotent(text):
    once = normalize_label(text)
    assert normalize_label(once) == once


def test_normalize_label_already_normalized_label_is_unchanged():
    assert normalize_label("some-section") == "some-section"
