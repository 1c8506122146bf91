"""Runtime utilities for output and version helpers."""

from .output import write_output_file
from .version import resolve_project_version

__all__ = [
    "resolve_project_version",
    "write_output_file",
]
