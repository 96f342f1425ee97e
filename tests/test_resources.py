from __future__ import annotations

import os

import pytest

from contextroots import analyzed_files, locate_roots
from contextroots.resources import (
    File,
    FileSystemException,
    Folder,
    InvalidPathError,
    MemoryResourceProvider,
    PhysicalResourceProvider,
    try_children,
    try_read,
)


def test_memory_provider_creates_ancestors() -> None:
    provider = MemoryResourceProvider()
    provider.new_file("/a/b/c.txt", "hi")

    assert isinstance(provider.get_resource("/a/b"), Folder)
    assert isinstance(provider.get_resource("/a/b/c.txt"), File)
    assert provider.get_folder("/a").get_children() == [provider.get_folder("/a/b")]
    assert provider.get_file("/a/b/c.txt").read_as_string() == "hi"


def test_memory_provider_delete_removes_subtree() -> None:
    provider = MemoryResourceProvider()
    provider.new_file("/a/b/c.txt")
    provider.new_file("/a/d.txt")

    provider.delete("/a/b")

    assert [child.path for child in provider.get_folder("/a").get_children()] == [
        "/a/d.txt"
    ]
    assert not provider.get_file("/a/b/c.txt").exists


def test_parent_chain_ends_at_root() -> None:
    provider = MemoryResourceProvider()
    folder = provider.new_folder("/a")

    assert folder.parent == provider.get_folder("/")
    assert folder.parent.parent is None


def test_contains_is_strict() -> None:
    provider = MemoryResourceProvider()
    folder = provider.get_folder("/a/b")

    assert folder.contains("/a/b/c")
    assert not folder.contains("/a/b")
    assert not folder.contains("/a/bc")
    assert folder.is_or_contains("/a/b")
    assert provider.get_folder("/").contains("/a")


def test_outcomes_distinguish_absence_and_errors() -> None:
    provider = MemoryResourceProvider()
    provider.new_file("/a/x.txt", "data")
    provider.unreadable.update({"/a/x.txt", "/a"})

    missing = try_read(provider.get_file("/a/none.txt"))
    failed = try_read(provider.get_file("/a/x.txt"))
    listing = try_children(provider.get_folder("/a"))

    assert missing.absent and not missing.ok
    assert isinstance(failed.error, FileSystemException)
    assert not failed.absent
    assert isinstance(listing.error, FileSystemException)
    assert listing.or_default([]) == []


@pytest.mark.parametrize("path", ["", "relative", "a/../b", "/a\0b"])
def test_invalid_paths_are_rejected(path) -> None:
    with pytest.raises(InvalidPathError):
        MemoryResourceProvider().get_resource(path)


def test_physical_provider_on_disk(tmp_path) -> None:
    proj = tmp_path / "proj"
    (proj / "lib").mkdir(parents=True)
    (proj / "lib" / "main.dart").write_text("void main() {}\n", encoding="utf-8")
    (proj / ".packages").write_text("", encoding="utf-8")
    (proj / "analysis_options.yaml").write_text(
        "analyzer:\n  exclude:\n    - build/**\n", encoding="utf-8"
    )
    (proj / "build").mkdir()
    (proj / "build" / "gen.dart").write_text("", encoding="utf-8")
    (proj / "tool").mkdir()
    (proj / "tool" / "analysis_options.yaml").write_text("", encoding="utf-8")
    (proj / "tool" / "run.dart").write_text("", encoding="utf-8")

    roots = locate_roots([str(proj)], resource_provider=PhysicalResourceProvider())

    assert [root.root.path for root in roots] == [str(proj), str(proj / "tool")]
    assert roots[0].packages_file.path == str(proj / ".packages")
    assert roots[0].excluded_paths == [str(proj / "build"), str(proj / "tool")]
    assert roots[1].options_file.path == str(proj / "tool" / "analysis_options.yaml")

    files = analyzed_files([str(proj)])
    assert files[str(proj)] == [
        str(proj / "analysis_options.yaml"),
        str(proj / "lib" / "main.dart"),
    ]
    assert files[str(proj / "tool")] == [
        str(proj / "tool" / "analysis_options.yaml"),
        str(proj / "tool" / "run.dart"),
    ]


def test_physical_provider_missing_folder_listing_fails(tmp_path) -> None:
    provider = PhysicalResourceProvider()

    with pytest.raises(FileSystemException):
        provider.get_folder(os.fspath(tmp_path / "missing")).get_children()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
def test_physical_provider_does_not_follow_folder_symlinks(tmp_path) -> None:
    proj = tmp_path / "proj"
    (proj / "lib").mkdir(parents=True)
    (proj / "lib" / "main.dart").write_text("", encoding="utf-8")
    (proj / "sub").mkdir()
    (proj / "sub" / ".packages").write_text("", encoding="utf-8")
    os.symlink(proj, proj / "lib" / "loop", target_is_directory=True)

    roots = locate_roots([str(proj)], resource_provider=PhysicalResourceProvider())

    assert [root.root.path for root in roots] == [str(proj), str(proj / "sub")]
    assert list(roots[0].analyzed_files()) == [str(proj / "lib" / "main.dart")]
