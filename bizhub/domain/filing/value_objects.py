"""Value objects for uploaded media."""

from enum import Enum


class UploadType(str, Enum):
    """What an uploaded image is used for."""

    IMAGE = "image"
    COVER = "cover"
    SLIDER = "slider"
    BANNER = "banner"
    MAP = "map"
    GALLERY = "gallery"
