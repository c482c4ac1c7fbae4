"""Filesystem-based document store for markdown notes."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..utils.observers import ObserverRegistry, SubscriptionHandle

logger = logging.getLogger(__name__)

Dispatch = Callable[..., Any]


def _call_directly(callback: Callable[..., Any], *args: Any) -> Any:
    return callback(*args)


class FilesystemDocumentStore:
    """
    Store for markdown documents under a root directory (the vault).

    Rewrites go through a temp file in the same directory followed by
    os.replace(), so readers never see a half-written document.
    """

    DOCUMENT_SUFFIX = ".md"

    def __init__(self, root: Path) -> None:
        self.root = root
        self._write_lock = threading.Lock()
        self._changed = ObserverRegistry("changed")
        self._deleted = ObserverRegistry("deleted")
        self._renamed = ObserverRegistry("renamed")
        self._observer: Any = None

    def ensure_directory(self) -> None:
        """Create the root directory if it doesn't exist."""
        self.root.mkdir(parents=True, exist_ok=True)

    # --- Documents ---

    def is_document(self, path: str) -> bool:
        return path.endswith(self.DOCUMENT_SUFFIX)

    def list_documents(self) -> list[str]:
        """Relative POSIX paths of all markdown files, sorted."""
        if not self.root.exists():
            return []
        return sorted(
            p.relative_to(self.root).as_posix()
            for p in self.root.rglob(f"*{self.DOCUMENT_SUFFIX}")
            if p.is_file()
        )

    def exists(self, path: str) -> bool:
        return (self.root / path).is_file()

    def read_document(self, path: str) -> str:
        """Read a document, keeping its line endings untouched."""
        with (self.root / path).open(encoding="utf-8", newline="") as f:
            return f.read()

    def atomic_rewrite(self, path: str, transform: Callable[[str], str]) -> bool:
        """Read-modify-write a document atomically."""
        filepath = self.root / path
        with self._write_lock:
            try:
                content = self.read_document(path)
            except FileNotFoundError:
                logger.debug("atomic_rewrite: document not found: %s", path)
                return False

            new_content = transform(content)
            if new_content == content:
                return True

            fd, tmp_name = tempfile.mkstemp(
                dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                    f.write(new_content)
                os.replace(tmp_name, filepath)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        return True

    # --- Change notification ---

    def on_changed(self, callback: Callable[[str], None]) -> SubscriptionHandle:
        return self._changed.subscribe(callback)

    def on_deleted(self, callback: Callable[[str], None]) -> SubscriptionHandle:
        return self._deleted.subscribe(callback)

    def on_renamed(self, callback: Callable[[str, str], None]) -> SubscriptionHandle:
        return self._renamed.subscribe(callback)

    def off(self, handle: SubscriptionHandle) -> None:
        for registry in (self._changed, self._deleted, self._renamed):
            if registry.unsubscribe(handle):
                return

    def emit_changed(self, path: str) -> None:
        self._changed.notify(path)

    def emit_deleted(self, path: str) -> None:
        self._deleted.notify(path)

    def emit_renamed(self, old_path: str, new_path: str) -> None:
        self._renamed.notify(old_path, new_path)

    # --- Watching ---

    def watch(self, dispatch: Dispatch | None = None) -> None:
        """
        Start watching the root directory for changes.

        Args:
            dispatch: Called as dispatch(emit, *args) for every event so the
                      caller can hop back onto its own thread. Defaults to
                      calling the emitter directly on the watcher thread.
        """
        if self._observer is not None:
            return
        self.ensure_directory()
        handler = _DocumentEventHandler(self, dispatch or _call_directly)
        observer = Observer()
        observer.schedule(handler, str(self.root), recursive=True)
        observer.daemon = True
        observer.start()
        self._observer = observer
        logger.info("Watching %s for changes", self.root)

    def stop(self) -> None:
        """Stop the watcher, if running."""
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout=2)
        self._observer = None

    def relative_path(self, absolute: str) -> str | None:
        """Convert a watcher path to a document path, or None if outside the root."""
        try:
            return Path(absolute).resolve().relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return None


class _DocumentEventHandler(FileSystemEventHandler):
    """Translate watchdog events into store notifications."""

    def __init__(self, store: FilesystemDocumentStore, dispatch: Dispatch) -> None:
        self.store = store
        self.dispatch = dispatch

    def _document(self, raw_path: bytes | str) -> str | None:
        path = self.store.relative_path(os.fsdecode(raw_path))
        if path is None or not self.store.is_document(path):
            return None
        return path

    def on_created(self, event: FileSystemEvent) -> None:
        self.on_modified(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        path = self._document(event.src_path)
        if path is not None:
            self.dispatch(self.store.emit_changed, path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        path = self._document(event.src_path)
        if path is not None:
            self.dispatch(self.store.emit_deleted, path)

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        old_path = self._document(event.src_path)
        new_path = self._document(event.dest_path)
        if old_path and new_path:
            self.dispatch(self.store.emit_renamed, old_path, new_path)
        elif new_path:
            # Atomic saves move a temp file over the document
            self.dispatch(self.store.emit_changed, new_path)
        elif old_path:
            self.dispatch(self.store.emit_deleted, old_path)
