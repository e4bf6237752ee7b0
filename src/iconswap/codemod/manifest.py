# src/iconswap/codemod/manifest.py
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class FileTarget:
    relative_path: str          # relative to the project dir, e.g. "src/pages/auth/login.tsx"
    depth: Optional[int] = None  # declared depth, cross-checked against the derived one

    @property
    def key(self) -> str:
        """Normalised form used to match skip entries."""
        return PurePosixPath(self.relative_path.replace("\\", "/")).as_posix()


@dataclass(frozen=True)
class Manifest:
    """
    Fixed, ordered list of files a run is scoped to.

    Built once from configuration and never mutated while the engine walks it.
    """
    targets: Tuple[FileTarget, ...] = ()
    skip: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_paths(cls, paths: Iterable, skip: Iterable[str] = ()) -> "Manifest":
        targets = []
        for entry in paths:
            if isinstance(entry, FileTarget):
                targets.append(entry)
            else:
                targets.append(FileTarget(str(entry)))
        skip_keys = frozenset(FileTarget(s).key for s in skip)
        return cls(targets=tuple(targets), skip=skip_keys)

    def is_skipped(self, target: FileTarget) -> bool:
        return target.key in self.skip

    def __iter__(self) -> Iterator[FileTarget]:
        return iter(self.targets)

    def __len__(self) -> int:
        return len(self.targets)
