"""Repository layer for document access."""

from .filesystem import FilesystemDocumentStore
from .protocol import DocumentStoreProtocol

__all__ = [
    "DocumentStoreProtocol",
    "FilesystemDocumentStore",
]
