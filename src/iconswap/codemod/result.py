# src/iconswap/codemod/result.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .manifest import FileTarget


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    OUTSIDE_SOURCE_ROOT = "outside_source_root"


class FileStatus(Enum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"
    ERROR = "error"
    SKIPPED = "skipped"


@dataclass
class RewriteResult:
    """Outcome of processing one manifest entry"""
    target: FileTarget
    found: bool = False
    changed: bool = False
    error: Optional[ErrorKind] = None
    depth: Optional[int] = None
    import_path: Optional[str] = None
    import_replacements: int = 0
    usage_replacements: int = 0
    declared_depth_mismatch: bool = False
    skipped: bool = False
    written: bool = False
    diff: Optional[str] = None
    message: Optional[str] = None

    @property
    def status(self) -> FileStatus:
        if self.skipped:
            return FileStatus.SKIPPED
        if self.error is ErrorKind.NOT_FOUND:
            return FileStatus.NOT_FOUND
        if self.error is not None:
            return FileStatus.ERROR
        if self.changed:
            return FileStatus.UPDATED
        return FileStatus.UNCHANGED


@dataclass
class RunSummary:
    results: List[RewriteResult] = field(default_factory=list)
    dry_run: bool = False

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def updated_count(self) -> int:
        return self.counts()[FileStatus.UPDATED]

    @property
    def has_errors(self) -> bool:
        return self.counts()[FileStatus.ERROR] > 0

    def counts(self) -> Dict[FileStatus, int]:
        counts = {status: 0 for status in FileStatus}
        for result in self.results:
            counts[result.status] += 1
        return counts

    def summary_line(self) -> str:
        verb = "would be updated" if self.dry_run else "updated"
        return f"{self.updated_count} of {self.total} files {verb}"
