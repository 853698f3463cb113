"""Pipelines for running transforms over many images."""

from ._shared import BatchResult
from .batch import process_directory

__all__ = ["BatchResult", "process_directory"]
