import os
from typing import Callable

Predicate = Callable[[str], bool]

def accept_all(path: str) -> bool:
    return True

def has_extension(*extensions: str) -> Predicate:
    """
    Builds a predicate matching paths whose final component ends with one of
    the given extensions (case-insensitive). A leading dot is optional.
    """
    if not extensions:
        raise ValueError("At least one extension is required.")

    wanted = {
        (ext if ext.startswith(".") else f".{ext}").lower()
        for ext in extensions
    }

    def _matches(path: str) -> bool:
        return os.path.splitext(path)[1].lower() in wanted

    return _matches
