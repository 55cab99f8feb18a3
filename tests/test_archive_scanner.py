"""Tests for archivestats.archive_scanner."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from archivestats.archive_scanner import ArchiveScanner
from archivestats.errors import ArchiveNotFoundError, ArchiveScanError


def test_scan_admits_only_dated_markdown_files(archive_builder) -> None:
    archive_builder.write(
        {
            "2021/01/04/hello.md": "# hello\n",
            "2021/01/04/hello.json": "{}",
            "2021/01/04/notes.txt": "plain\n",
            "drafts/unpublished.md": "# draft\n",
            "2021/1/4/short.md": "# wrong layout\n",
            "about.md": "# about\n",
        }
    )

    files = archive_builder.scan()
    root = archive_builder.path().as_posix()

    assert files == [f"{root}/2021/01/04/hello.md"]


def test_scan_excludes_deny_listed_paths(archive_builder) -> None:
    archive_builder.write(
        {
            "2021/01/04/README.md": "# readme\n",
            ".git/2021/01/04/object.md": "# object\n",
            ".gitea/2020/05/06/issue.md": "# issue\n",
            "2021/01/05/kept.md": "# kept\n",
        }
    )

    files = archive_builder.scan()

    assert [Path(path).name for path in files] == ["kept.md"]


def test_scan_returns_paths_in_lexicographic_order(archive_builder) -> None:
    archive_builder.write(
        {
            "2022/03/01/b.md": "b\n",
            "2021/12/31/z.md": "z\n",
            "2022/03/01/a.md": "a\n",
            "2021/01/02/m.md": "m\n",
        }
    )

    files = archive_builder.scan()

    assert files == sorted(files)
    assert [Path(path).name for path in files] == ["m.md", "z.md", "a.md", "b.md"]


def test_scan_honours_custom_extension_and_deny_list(archive_builder) -> None:
    archive_builder.write(
        {
            "2021/01/04/post.markdown": "post\n",
            "2021/01/04/post.md": "post\n",
            "2021/01/04/private-post.markdown": "secret\n",
        }
    )

    scanner = ArchiveScanner(content_extension=".markdown", deny_list=["private-"])
    files = scanner.scan(archive_builder.path())

    assert [Path(path).name for path in files] == ["post.markdown"]


def test_admits_requires_archive_pattern() -> None:
    scanner = ArchiveScanner()

    assert scanner.admits("/site/2021/01/04/post.md")
    assert not scanner.admits("/site/2021/01/post.md")
    assert not scanner.admits("/site/21/01/04/post.md")
    assert not scanner.admits("/site/2021/01/04/post.json")
    assert not scanner.admits("/site/2021/01/04/README.md")
    assert not scanner.admits("/site/２０２１/０１/０４/post.md")


def test_scan_rejects_missing_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(ArchiveNotFoundError) as excinfo:
        ArchiveScanner().scan(missing)

    assert str(missing) in str(excinfo.value)


def test_scan_rejects_file_root(tmp_path: Path) -> None:
    target = tmp_path / "file.md"
    target.write_text("x", encoding="utf-8")

    with pytest.raises(ArchiveScanError):
        ArchiveScanner().scan(target)


def test_scan_treats_walk_errors_as_fatal(archive_builder, monkeypatch) -> None:
    archive_builder.write({"2021/01/04/post.md": "post\n"})

    def _failing_walk(top, onerror=None, **kwargs):
        onerror(PermissionError(13, "Permission denied", str(top)))
        return iter(())

    monkeypatch.setattr(os, "walk", _failing_walk)

    with pytest.raises(ArchiveScanError) as excinfo:
        ArchiveScanner().scan(archive_builder.path())

    assert "Permission denied" in str(excinfo.value)
