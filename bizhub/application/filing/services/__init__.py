from .image_processing_service import ImageProcessingService
from .parallel_uploader import (
    ParallelUploader,
    ProgressStream,
    UploadOutcome,
    UploadProgress,
)
from .video_processing_service import VideoProcessingService

__all__ = [
    "ImageProcessingService",
    "ParallelUploader",
    "ProgressStream",
    "UploadOutcome",
    "UploadProgress",
    "VideoProcessingService",
]
