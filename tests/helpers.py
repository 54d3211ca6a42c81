# File: tests/helpers.py

import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from fsvisitor.features.traversal.domain.interfaces import IDirectoryLister


def build_tree(base: Path, layout: Dict[str, Optional[dict]]) -> str:
    """
    Materializes a nested dict under `base`. A dict value is a directory,
    None is an empty file. Returns the path of the single top-level entry.
    """
    created = []
    for name, children in layout.items():
        path = base / name
        if children is None:
            path.write_text("")
        else:
            path.mkdir()
            build_tree(path, children)
        created.append(path)
    # Empty directories create nothing below themselves.
    return str(created[0]) if created else str(base)


def walk_all(root: str) -> Tuple[List[str], List[str]]:
    """Every file and directory below root, using os.walk as the oracle."""
    files, directories = [], []
    for dirpath, dirnames, filenames in os.walk(root):
        files.extend(os.path.join(dirpath, f) for f in filenames)
        directories.extend(os.path.join(dirpath, d) for d in dirnames)
    return files, directories


def is_all_files(paths: Iterable[str]) -> bool:
    if paths is None:
        raise ValueError("paths is required")
    return all(os.path.isfile(p) for p in paths)


def is_all_directories(paths: Iterable[str]) -> bool:
    if paths is None:
        raise ValueError("paths is required")
    return all(os.path.isdir(p) for p in paths)


def same_entries(left: Iterable[str], right: Iterable[str]) -> bool:
    """Order-insensitive comparison that still catches duplicates."""
    return sorted(left) == sorted(right)


class FakeDirectoryLister(IDirectoryLister):
    """
    Deterministic in-memory lister. Records every listing call so tests can
    assert on laziness. Paths listed in `failing` raise PermissionError.
    """

    def __init__(self, tree: Dict[str, Tuple[List[str], List[str]]], failing: Iterable[str] = ()):
        self.tree = tree
        self.failing = set(failing)
        self.calls: List[Tuple[str, str]] = []

    def is_directory(self, path: str) -> bool:
        return path in self.tree

    def iter_files(self, directory: str) -> Iterator[str]:
        self.calls.append(("files", directory))
        self._check(directory)
        yield from self.tree[directory][0]

    def iter_directories(self, directory: str) -> Iterator[str]:
        self.calls.append(("directories", directory))
        self._check(directory)
        yield from self.tree[directory][1]

    def _check(self, directory: str) -> None:
        if directory in self.failing:
            raise PermissionError(f"Permission denied: '{directory}'")
