"""Unit tests for the identity primitives."""

import os

import pytest

from mdmerge.api.identity.FileIdentity import FileIdentity
from mdmerge.api.identity.identity_of import identity_of
from mdmerge.api.identity.IdentityError import IdentityError
from mdmerge.api.identity.path_of_identity import path_of_identity


def test_identity_is_stable_under_path_aliasing(tmp_path):
    (tmp_path / "sub").mkdir()
    target = tmp_path / "a.md"
    target.write_text("# A\n", encoding="utf-8")

    direct = identity_of(target)
    aliased = identity_of(tmp_path / "sub" / ".." / "a.md")
    assert direct == aliased
    assert str(direct) == str(aliased)


def test_identity_differs_between_files(tmp_path):
    (tmp_path / "a.md").write_text("x", encoding="utf-8")
    (tmp_path / "b.md").write_text("x", encoding="utf-8")
    assert identity_of(tmp_path / "a.md") != identity_of(tmp_path / "b.md")


def test_identity_string_form_uses_prefix(tmp_path):
    path = tmp_path / "a.md"
    path.write_text("x", encoding="utf-8")
    identity = identity_of(path, prefix="id")
    info = os.stat(path)
    assert str(identity) == f"id{info.st_dev}x{info.st_ino}"
    # The prefix is presentation only
    assert identity == identity_of(path, prefix="n")


def test_identity_of_missing_file_raises(tmp_path):
    with pytest.raises(IdentityError, match="cannot resolve identity"):
        identity_of(tmp_path / "missing.md")


def test_identity_of_directory_raises(tmp_path):
    with pytest.raises(IdentityError, match="not a regular file"):
        identity_of(tmp_path)


def test_path_of_identity_round_trip(tmp_path):
    (tmp_path / "nested").mkdir()
    path = tmp_path / "nested" / "a.md"
    path.write_text("x", encoding="utf-8")
    (tmp_path / "other.md").write_text("y", encoding="utf-8")

    assert path_of_identity(identity_of(path), tmp_path) == path


def test_path_of_identity_not_found(tmp_path):
    missing = FileIdentity(device=0, inode=0)
    with pytest.raises(IdentityError, match="found nothing"):
        path_of_identity(missing, tmp_path)


def test_path_of_identity_ambiguous_hard_links(tmp_path):
    path = tmp_path / "a.md"
    path.write_text("x", encoding="utf-8")
    os.link(path, tmp_path / "b.md")

    with pytest.raises(IdentityError, match="unexpected result"):
        path_of_identity(identity_of(path), tmp_path)


def test_identity_string_form_differs_across_devices():
    first = FileIdentity(device=1, inode=42)
    second = FileIdentity(device=2, inode=42)

    assert first != second
    assert str(first) != str(second)
    assert str(first) == "n1x42"
