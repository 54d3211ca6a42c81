# File: fsvisitor/core/config/settings.py

import os


class Settings:
    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FSVISITOR_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv("FSVISITOR_LOG_FORMAT", "%(message)s")

    # --- Traversal ---
    # Symlinked directories are walked like real ones (no cycle detection).
    FOLLOW_SYMLINKS: bool = os.getenv("FSVISITOR_FOLLOW_SYMLINKS", "true").lower() == "true"


settings = Settings()
