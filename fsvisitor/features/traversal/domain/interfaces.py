from abc import ABC, abstractmethod
from typing import Iterator

class IDirectoryLister(ABC):
    """
    Contract for enumerating the immediate children of a directory.
    Order is whatever the platform yields; callers must not rely on sorting.
    """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        True if `path` names an existing directory that can be searched.
        """
        pass

    def descend(self, directory: str) -> bool:
        """
        False if a listed directory must be reported but not walked into.
        """
        return True

    @abstractmethod
    def iter_files(self, directory: str) -> Iterator[str]:
        """
        Yields paths of the non-directory entries directly inside `directory`.
        """
        pass

    @abstractmethod
    def iter_directories(self, directory: str) -> Iterator[str]:
        """
        Yields paths of the subdirectories directly inside `directory`.
        """
        pass
