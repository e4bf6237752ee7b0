from .engine import CodemodEngine
from .errors import IconSwapError, ConfigError, SourceRootNotFoundError
from .manifest import FileTarget, Manifest
from .paths import derive_depth, relative_import_path
from .patterns import ImportRule, UsageRule
from .result import ErrorKind, FileStatus, RewriteResult, RunSummary

__all__ = [
    "CodemodEngine",
    "IconSwapError",
    "ConfigError",
    "SourceRootNotFoundError",
    "FileTarget",
    "Manifest",
    "derive_depth",
    "relative_import_path",
    "ImportRule",
    "UsageRule",
    "ErrorKind",
    "FileStatus",
    "RewriteResult",
    "RunSummary",
]
