"""
Unlock credential holder.

The Real-Debrid token entered on the configure page lives here for the
lifetime of the process. There is a single credential per instance:
the last write wins and nothing survives a restart.

Stream handlers take one snapshot per request and pass it to the
resolver, so a concurrent update never changes a resolution midway.
"""

from threading import Lock


class CredentialStore:
    def __init__(self, initial: str = ""):
        self._lock = Lock()
        self._value = initial.strip()

    def get(self) -> str | None:
        """
        Return the current credential, or None when unset.
        """
        with self._lock:
            return self._value or None

    def set(self, value: str) -> bool:
        """
        Replace the stored credential.

        Returns False (and leaves the store untouched) for blank input.
        """
        value = (value or "").strip()
        if not value:
            return False

        with self._lock:
            self._value = value
        return True

    def is_set(self) -> bool:
        return self.get() is not None
