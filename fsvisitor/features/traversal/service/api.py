# File: fsvisitor/features/traversal/service/api.py
from typing import Iterator, List, Optional
from ..domain.predicates import Predicate
from .visitor import FileSystemVisitor, PathLike

def search(root_path: PathLike, predicate: Optional[Predicate] = None) -> Iterator[str]:
    """
    Public API: lazily walk `root_path` yielding entries accepted by `predicate`.
    Uses a throwaway visitor, so no listeners are attached.
    """
    return FileSystemVisitor(predicate).search(root_path)

def collect(root_path: PathLike, predicate: Optional[Predicate] = None) -> List[str]:
    """
    Same as search() but materializes the whole walk.
    """
    return list(search(root_path, predicate))
