import os
import logging
from typing import Iterator, Optional, Tuple
from fsvisitor.core.config.settings import settings
from ..domain.interfaces import IDirectoryLister

logger = logging.getLogger(__name__)

class LocalDirectoryLister(IDirectoryLister):
    """
    Concrete implementation using os.scandir.
    Each call opens its own scan, so files and directories are two
    independent passes over the same directory.
    Symlinked directories are always listed as directories; they are only
    walked into when following symlinks.
    """

    def __init__(self, follow_symlinks: Optional[bool] = None):
        if follow_symlinks is None:
            follow_symlinks = settings.FOLLOW_SYMLINKS
        self.follow_symlinks = follow_symlinks

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def descend(self, directory: str) -> bool:
        return self.follow_symlinks or not os.path.islink(directory)

    def iter_files(self, directory: str) -> Iterator[str]:
        for path, is_dir in self._scan(directory):
            if not is_dir:
                yield path

    def iter_directories(self, directory: str) -> Iterator[str]:
        for path, is_dir in self._scan(directory):
            if is_dir:
                yield path

    def _scan(self, directory: str) -> Iterator[Tuple[str, bool]]:
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    yield entry.path, entry.is_dir()
        except OSError as e:
            # A directory vanishing or losing permissions mid-walk ends the walk.
            logger.error(f"Could not list directory {directory}: {e}")
            raise
