# File: tests/conftest.py

import os
import sys
import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from tests.helpers import build_tree, FakeDirectoryLister


@pytest.fixture
def sample_tree(tmp_path):
    """
    Creates the reference tree used by most traversal tests:

    test-root-directory/
        first-dir/
            file1.txt, file2.cs, file3.exe
            sub-dir1.cs/   sub-file1.pdb, sub-file2.pdb, sub-file3.pdb
            sub-dir2/      sub2-file1.pdb, sub2-file2.xlsx, sub2-file3.xlsx
            sub-dir3.pdb/  (empty)
    """
    return build_tree(tmp_path, {
        "test-root-directory": {
            "first-dir": {
                "file1.txt": None,
                "file2.cs": None,
                "file3.exe": None,
                "sub-dir1.cs": {
                    "sub-file1.pdb": None,
                    "sub-file2.pdb": None,
                    "sub-file3.pdb": None,
                },
                "sub-dir2": {
                    "sub2-file1.pdb": None,
                    "sub2-file2.xlsx": None,
                    "sub2-file3.xlsx": None,
                },
                "sub-dir3.pdb": {},
            }
        }
    })


@pytest.fixture
def small_tree(tmp_path):
    """
    root/{a.txt, sub/{b.txt, c.log}}
    """
    return build_tree(tmp_path, {
        "root": {
            "a.txt": None,
            "sub": {"b.txt": None, "c.log": None},
        }
    })


@pytest.fixture
def fake_lister():
    """
    In-memory lister with a fixed, known enumeration order:

    r/
        top.txt
        d1/   x.txt, y.log
        d2/   z.txt
              deep/  w.txt
    """
    return FakeDirectoryLister({
        "r": (["r/top.txt"], ["r/d1", "r/d2"]),
        "r/d1": (["r/d1/x.txt", "r/d1/y.log"], []),
        "r/d2": (["r/d2/z.txt"], ["r/d2/deep"]),
        "r/d2/deep": (["r/d2/deep/w.txt"], []),
    })
