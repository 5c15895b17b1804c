from .file_storage import FileInfo, FileStorageProtocol, ReadableStream, StoredFile

__all__ = [
    "FileInfo",
    "FileStorageProtocol",
    "ReadableStream",
    "StoredFile",
]
