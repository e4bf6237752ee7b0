# src/iconswap/app.py

import argparse
import logging
from pathlib import Path

from rich.markup import escape

from iconswap.cli.controller import canvas
from iconswap.cli.view import render_summary
from iconswap.codemod.engine import CodemodEngine
from iconswap.codemod.errors import IconSwapError
from iconswap.config.config import load_config

EXIT_OK = 0
EXIT_FATAL = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconswap",
        description="Replace @iconify/react Icon imports and usages with a local LocalIcon component",
    )
    parser.add_argument("--config", "-c", type=Path, default=None,
                        help="Path to the YAML manifest (default: ./config.yaml or $ICONSWAP_CONFIG)")
    parser.add_argument("--project-dir", "-p", default=None,
                        help="Project directory the manifest paths are relative to")
    parser.add_argument("--source-dir", "-s", default=None,
                        help="Source root inside the project directory (default: src)")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="Only rewrite <Icon> tags whose first attribute is icon=")
    parser.add_argument("--dry-run", "-n", action="store_true",
                        help="Report what would change without writing any file")
    parser.add_argument("--diff", action="store_true",
                        help="Show a unified diff for every changed file")
    parser.add_argument("--table", action="store_true",
                        help="Print a results table after the per-file lines")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    canvas.configure(no_color=args.no_color)

    try:
        config = load_config(
            args.config,
            project_dir=args.project_dir,
            source_dir=args.source_dir,
            strict_usage=args.strict,
        )
        engine = CodemodEngine.from_config(config, dry_run=args.dry_run, collect_diffs=args.diff)
        canvas.start_process(escape(f"Replacing {config.icon_module} imports in {config.project_dir}"))
        manifest = config.manifest()
        canvas.step(f"Processing {len(manifest)} files under {escape(config.source_dir)}/")
        summary = engine.run(manifest)
    except IconSwapError as e:
        canvas.error(escape(str(e)))
        return EXIT_FATAL

    if summary.has_errors:
        canvas.set_mode("alert")
    render_summary(canvas, summary, show_diff=args.diff, show_table=args.table)
    canvas.end_process("Codemod finished")
    return EXIT_OK


def main():
    """Entry point for the iconswap CLI."""
    raise SystemExit(run())
