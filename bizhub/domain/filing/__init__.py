from .value_objects import UploadType

__all__ = [
    "UploadType",
]
