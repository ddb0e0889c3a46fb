"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_OPERATION_BATCH_SIZE,
    STATUS_DONE,
    STATUS_IN_PROGRESS,
    STATUS_NOT_STARTED,
    TASK_TITLE_PATTERN,
)
from .helpers import chunk, split_comma_separated

__all__ = [
    "DEFAULT_OPERATION_BATCH_SIZE",
    "STATUS_DONE",
    "STATUS_IN_PROGRESS",
    "STATUS_NOT_STARTED",
    "TASK_TITLE_PATTERN",
    "chunk",
    "split_comma_separated",
]
