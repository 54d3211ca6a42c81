from dataclasses import dataclass
from fsvisitor.core.common.enums import EntryKind, Notification

@dataclass
class VisitEvent:
    """
    Payload of an entry notification (entry_found / filtered_entry_found).
    Listeners steer the walk by flipping the two output fields.
    A fresh event is created for every notification.
    """
    path: str
    kind: EntryKind
    stop_search: bool = False
    exclude_entry: bool = False

    @property
    def is_file(self) -> bool:
        return self.kind == EntryKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

@dataclass(frozen=True)
class LifecycleEvent:
    """
    Payload of the start / finish notifications.
    """
    notification: Notification
    root_path: str

@dataclass
class WalkControl:
    """
    Control record for a single search() call.
    The same instance is handed to every recursive frame, so a stop raised
    deep in the tree is seen by all enclosing levels.
    """
    stop_search: bool = False
    exclude_entry: bool = False

    def absorb(self, event: VisitEvent) -> None:
        """Copies the listener verdict for the entry just announced."""
        # Stop is sticky for the rest of the walk, exclusion is per entry.
        self.stop_search = self.stop_search or event.stop_search
        self.exclude_entry = event.exclude_entry
