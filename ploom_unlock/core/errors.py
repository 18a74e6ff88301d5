"""
Ploom FPS Unlock: Error kinds.

Every failure the unlocker reports belongs to one of four kinds. Callers can
match on the subclass or on the ``kind`` tag; ``str(err)`` is the text shown
in the status label.
"""


class UnlockError(Exception):
    """Base class for all unlocker failures."""
    kind = "unknown"


class StoreError(UnlockError):
    """The database could not be opened, queried or updated, or the row is missing."""
    kind = "store"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Database error: {detail}")


class MalformedSettingsError(UnlockError):
    """The stored value is not JSON, not an object, or lacks the integer frame-rate field."""
    kind = "parse"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"JSON error: {detail}")


class SettingsFileNotFoundError(UnlockError):
    kind = "not_found"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found or inaccessible: {path}")


class RegistryError(UnlockError):
    kind = "registry"

    def __init__(self):
        super().__init__("Registry error: Could not access the registry key or value.")
