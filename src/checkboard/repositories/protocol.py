"""Document store protocol for task sources."""

from collections.abc import Callable
from typing import Protocol

from ..utils.observers import SubscriptionHandle


class DocumentStoreProtocol(Protocol):
    """Interface for the host that owns the task documents.

    Document paths are relative POSIX paths (e.g., "projects/home.md").
    The store owns reading, atomic rewriting and change notification;
    the task model never touches files directly.
    """

    def list_documents(self) -> list[str]:
        """List every markdown document path."""
        ...

    def exists(self, path: str) -> bool:
        """Check whether a document exists."""
        ...

    def read_document(self, path: str) -> str:
        """Read a document's full text.

        Raises:
            OSError: If the document cannot be read.
        """
        ...

    def atomic_rewrite(self, path: str, transform: Callable[[str], str]) -> bool:
        """Replace a document's text with transform(text) in one step.

        Returns:
            False if the document does not exist, True otherwise.
        """
        ...

    def on_changed(self, callback: Callable[[str], None]) -> SubscriptionHandle:
        """Register a callback for modified or created documents."""
        ...

    def on_deleted(self, callback: Callable[[str], None]) -> SubscriptionHandle:
        """Register a callback for deleted documents."""
        ...

    def on_renamed(self, callback: Callable[[str, str], None]) -> SubscriptionHandle:
        """Register a callback receiving (old_path, new_path)."""
        ...

    def off(self, handle: SubscriptionHandle) -> None:
        """Unregister a callback by its handle."""
        ...
