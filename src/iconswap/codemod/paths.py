# src/iconswap/codemod/paths.py
# Depth derivation and relative import paths for the replacement module.

from pathlib import Path
from typing import Optional


def derive_depth(file_path: Path, source_root: Path) -> Optional[int]:
    """
    Number of directory levels between ``source_root`` and the directory
    holding ``file_path``.

    ``src/App.tsx`` is depth 0, ``src/pages/auth/login.tsx`` is depth 2.
    Returns None when the file does not live under the source root.
    """
    file_path = Path(file_path).resolve()
    source_root = Path(source_root).resolve()
    try:
        relative = file_path.parent.relative_to(source_root)
    except ValueError:
        return None
    return len(relative.parts)


def relative_import_path(depth: int, module: str) -> str:
    """Relative specifier that reaches ``module`` (source-root relative) from ``depth``."""
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    module = module.strip("/")
    if depth == 0:
        # a bare "components/X" would be looked up as a package
        return f"./{module}"
    return "../" * depth + module
