# src/iconswap/codemod/engine.py
# Runs the import/usage rewrite over every manifest entry and collects results.

import difflib
import logging
from pathlib import Path
from typing import Optional

from .errors import SourceRootNotFoundError
from .manifest import FileTarget, Manifest
from .paths import derive_depth, relative_import_path
from .patterns import ImportRule, UsageRule
from .result import ErrorKind, RewriteResult, RunSummary

logger = logging.getLogger(__name__)


class CodemodEngine:
    """
    Rewrites ``import { Icon } from '@iconify/react'`` and ``<Icon ...>`` usages
    to a local replacement module.

    Files are handled one at a time and independently: a missing or unreadable
    file is recorded on its ``RewriteResult`` and the run moves on. Only a
    missing project/source root aborts, and it does so before any file is read.
    """

    def __init__(
        self,
        project_dir: Path,
        source_dir: str = "src",
        replacement_module: str = "components/LocalIcon",
        import_rule: Optional[ImportRule] = None,
        usage_rule: Optional[UsageRule] = None,
        dry_run: bool = False,
        collect_diffs: bool = False,
    ):
        self.project_dir = Path(project_dir)
        self.source_root = self.project_dir / source_dir
        self.replacement_module = replacement_module
        self.import_rule = import_rule or ImportRule()
        self.usage_rule = usage_rule or UsageRule()
        self.dry_run = dry_run
        self.collect_diffs = collect_diffs

    @classmethod
    def from_config(cls, config, dry_run: bool = False, collect_diffs: bool = False) -> "CodemodEngine":
        return cls(
            project_dir=config.project_dir,
            source_dir=config.source_dir,
            replacement_module=config.replacement_module,
            import_rule=ImportRule(
                binding=config.binding,
                module=config.icon_module,
                local_name=config.local_name,
            ),
            usage_rule=UsageRule(
                binding=config.binding,
                local_name=config.local_name,
                strict=config.strict_usage,
            ),
            dry_run=dry_run,
            collect_diffs=collect_diffs,
        )

    def check_roots(self):
        for root in (self.project_dir, self.source_root):
            if not root.is_dir():
                raise SourceRootNotFoundError(root)

    def run(self, manifest: Manifest) -> RunSummary:
        self.check_roots()
        logger.debug(f"Processing {len(manifest)} targets under {self.source_root}")

        summary = RunSummary(dry_run=self.dry_run)
        for target in manifest:
            if manifest.is_skipped(target):
                logger.debug(f"Skipping {target.relative_path} (listed in skip)")
                summary.results.append(RewriteResult(target=target, skipped=True))
                continue
            summary.results.append(self.process(target))
        return summary

    def rewrite(self, content: str, import_path: str):
        """Apply both rules to ``content``; returns (new_content, import_count, usage_count)."""
        content, import_count = self.import_rule.apply(content, import_path)
        content, usage_count = self.usage_rule.apply(content)
        return content, import_count, usage_count

    def process(self, target: FileTarget) -> RewriteResult:
        result = RewriteResult(target=target)
        full_path = self.project_dir / target.relative_path

        if not full_path.is_file():
            result.error = ErrorKind.NOT_FOUND
            result.message = f"File not found: {full_path}"
            logger.info(result.message)
            return result
        result.found = True

        depth = derive_depth(full_path, self.source_root)
        if depth is None:
            result.error = ErrorKind.OUTSIDE_SOURCE_ROOT
            result.message = f"{target.relative_path} is not under {self.source_root}"
            logger.warning(result.message)
            return result
        result.depth = depth
        if target.depth is not None and target.depth != depth:
            result.declared_depth_mismatch = True
            logger.warning(
                f"Declared depth {target.depth} for {target.relative_path} does not match "
                f"its location (depth {depth}); using {depth}"
            )
        result.import_path = relative_import_path(depth, self.replacement_module)

        try:
            original = self._read(full_path)
        except (OSError, UnicodeDecodeError) as e:
            result.error = ErrorKind.IO_ERROR
            result.message = f"Could not read {full_path}: {e}"
            logger.error(result.message)
            return result

        updated, result.import_replacements, result.usage_replacements = self.rewrite(
            original, result.import_path
        )
        result.changed = updated != original
        if not result.changed:
            logger.debug(f"No matches in {target.relative_path}")
            return result

        if self.collect_diffs:
            result.diff = self._diff(target.relative_path, original, updated)

        if self.dry_run:
            return result

        try:
            self._write(full_path, updated)
        except OSError as e:
            result.error = ErrorKind.IO_ERROR
            result.message = f"Could not write {full_path}: {e}"
            logger.error(result.message)
            return result
        result.written = True
        logger.debug(
            f"Rewrote {target.relative_path}: {result.import_replacements} import(s), "
            f"{result.usage_replacements} usage(s)"
        )
        return result

    @staticmethod
    def _read(path: Path) -> str:
        # newline="" keeps \r\n untouched on both read and write
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    @staticmethod
    def _write(path: Path, content: str):
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    @staticmethod
    def _diff(rel_path: str, original: str, updated: str) -> str:
        return "".join(
            difflib.unified_diff(
                original.splitlines(keepends=True),
                updated.splitlines(keepends=True),
                fromfile=f"a/{rel_path}",
                tofile=f"b/{rel_path}",
            )
        )
