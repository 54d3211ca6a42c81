import os
import logging
from typing import Iterator, Optional, Union

from fsvisitor.core.common.enums import EntryKind, Notification
from ..domain.interfaces import IDirectoryLister
from ..domain.models import LifecycleEvent, VisitEvent, WalkControl
from ..domain.predicates import Predicate, accept_all
from ..data.local_lister import LocalDirectoryLister
from .notifications import Listener, NotificationHub

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

class FileSystemVisitor:
    """
    Lazy depth-first walker with steerable notifications.

    Files of a directory are announced before its subdirectories, and each
    subdirectory is descended into right after it is announced.
    Listeners may set `stop_search` (ends the whole walk) or
    `exclude_entry` (drops just the current entry) on the event they receive.
    """

    def __init__(self,
                 predicate: Optional[Predicate] = None,
                 lister: Optional[IDirectoryLister] = None):
        if predicate is not None and not callable(predicate):
            raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")

        self.predicate: Predicate = predicate if predicate is not None else accept_all
        self.lister: IDirectoryLister = lister or LocalDirectoryLister()
        self.notifications = NotificationHub()

    # --- Listener registration ---

    def on_start(self, listener: Listener) -> Listener:
        return self.notifications.subscribe(Notification.START, listener)

    def on_finish(self, listener: Listener) -> Listener:
        return self.notifications.subscribe(Notification.FINISH, listener)

    def on_entry_found(self,
                       listener: Optional[Listener] = None,
                       kind: Optional[EntryKind] = None):
        """
        Subscribes to every discovered entry (optionally only files or only
        directories). Usable directly or as a decorator.
        """
        return self._subscribe(Notification.ENTRY_FOUND, listener, kind)

    def on_filtered_entry_found(self,
                                listener: Optional[Listener] = None,
                                kind: Optional[EntryKind] = None):
        """
        Subscribes to entries accepted by the predicate.
        """
        return self._subscribe(Notification.FILTERED_ENTRY_FOUND, listener, kind)

    def _subscribe(self, notification: Notification, listener: Optional[Listener], kind: Optional[EntryKind]):
        if listener is None:
            return lambda fn: self.notifications.subscribe(notification, fn, kind)
        return self.notifications.subscribe(notification, listener, kind)

    # --- Search ---

    def search(self, root_path: PathLike) -> Iterator[str]:
        """
        Validates the root and returns a lazy iterator of matching paths.

        Raises:
            ValueError: root_path is None.
            FileNotFoundError: root_path is not an existing directory.
        """
        if root_path is None:
            logger.error("Search requested without a root directory")
            raise ValueError("root_path is required.")

        root = os.fspath(root_path)
        if not self.lister.is_directory(root):
            logger.error(f"Search root not found: {root!r}")
            raise FileNotFoundError(f"Can't find \"{root}\" directory.")

        # Fresh control per call, so overlapping walks never share flags.
        return self._walk(root, WalkControl())

    def _walk(self, root: str, control: WalkControl) -> Iterator[str]:
        self.notifications.publish(Notification.START, LifecycleEvent(Notification.START, root))
        logger.info(f"Starting search of: {root}")

        emitted = 0
        for path in self._find(root, control):
            emitted += 1
            yield path

        state = "stopped" if control.stop_search else "complete"
        logger.info(f"Search {state}. Yielded {emitted} entries from {root}")
        self.notifications.publish(Notification.FINISH, LifecycleEvent(Notification.FINISH, root))

    def _find(self, directory: str, control: WalkControl) -> Iterator[str]:
        # 1. Files
        for file_path in self.lister.iter_files(directory):
            self._announce(Notification.ENTRY_FOUND, file_path, EntryKind.FILE, control)
            if control.stop_search:
                return
            # Excluded files are never classified.
            if control.exclude_entry:
                continue

            if self.predicate(file_path):
                self._announce(Notification.FILTERED_ENTRY_FOUND, file_path, EntryKind.FILE, control)
                if control.stop_search:
                    return
                if control.exclude_entry:
                    continue
                yield file_path

        # 2. Subdirectories
        for dir_path in self.lister.iter_directories(directory):
            self._announce(Notification.ENTRY_FOUND, dir_path, EntryKind.DIRECTORY, control)
            if control.stop_search:
                return

            if not control.exclude_entry and self.predicate(dir_path):
                self._announce(Notification.FILTERED_ENTRY_FOUND, dir_path, EntryKind.DIRECTORY, control)
                if control.stop_search:
                    return
                if not control.exclude_entry:
                    yield dir_path

            # Exclusion hides the directory itself, never its contents.
            if self.lister.descend(dir_path):
                yield from self._find(dir_path, control)
            if control.stop_search:
                return

    def _announce(self, notification: Notification, path: str, kind: EntryKind, control: WalkControl) -> None:
        event = VisitEvent(path=path, kind=kind)
        self.notifications.publish(notification, event)
        control.absorb(event)

        if event.stop_search:
            logger.debug(f"Stop requested at {kind.value} {path}")
        elif event.exclude_entry:
            logger.debug(f"Excluded {kind.value} {path}")
