# File: fsvisitor/core/common/enums.py

from enum import Enum, unique

@unique
class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"

@unique
class Notification(str, Enum):
    START = "start"
    FINISH = "finish"
    ENTRY_FOUND = "entry_found"
    FILTERED_ENTRY_FOUND = "filtered_entry_found"
