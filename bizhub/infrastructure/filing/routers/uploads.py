"""Helpers turning multipart uploads into service inputs."""

import logging
from typing import Any

from fastapi import UploadFile

from bizhub.application.filing.dtos import BulkUploadItemResponse
from bizhub.application.filing.services import UploadOutcome, UploadProgress
from bizhub.application.filing.uploads import FileUpload

logger = logging.getLogger(__name__)


def to_file_upload(file: UploadFile) -> FileUpload:
    return FileUpload(
        file_name=file.filename or "",
        content_type=file.content_type,
        stream=file,
        size=file.size,
    )


def log_progress(progress: UploadProgress) -> None:
    if progress.percent == 100:
        logger.debug(f"Upload of {progress.file_name} complete ({progress.bytes_read} bytes)")


def to_bulk_items(outcomes: list[UploadOutcome]) -> list[BulkUploadItemResponse[Any]]:
    return [
        BulkUploadItemResponse[Any](
            file_name=outcome.file_name,
            succeeded=outcome.succeeded,
            messages=list(outcome.result.messages),
            data=outcome.result.data if outcome.succeeded else None,
        )
        for outcome in outcomes
    ]
