# src/iconswap/cli/view.py
# Renders RunSummary results: one status line per file, optional diffs/table, summary line.

from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from iconswap.codemod.result import FileStatus, RewriteResult, RunSummary

STATUS_SYMBOLS = {
    FileStatus.UPDATED: ("✓", "updated", "updated"),
    FileStatus.UNCHANGED: ("-", "unchanged", "unchanged"),
    FileStatus.NOT_FOUND: ("!", "missing", "not found"),
    FileStatus.ERROR: ("✗", "failed", "error"),
    FileStatus.SKIPPED: ("~", "skipped", "skipped"),
}


def format_result_line(result: RewriteResult, dry_run: bool = False) -> str:
    symbol, style, label = STATUS_SYMBOLS[result.status]
    if dry_run and result.status is FileStatus.UPDATED:
        label = "would update"
    line = f"[{style}]{symbol} {label}[/]: [path]{escape(result.target.relative_path)}[/]"

    if result.status is FileStatus.UPDATED:
        line += f" [detail]-> {escape(result.import_path)}[/]"
    elif result.message and result.status in (FileStatus.ERROR, FileStatus.NOT_FOUND):
        line += f" [detail]({escape(result.message)})[/]"
    if result.declared_depth_mismatch:
        line += f" [warning](declared depth {result.target.depth}, actual {result.depth})[/]"
    return line


def print_result(canvas, result: RewriteResult, dry_run: bool = False):
    canvas.print(format_result_line(result, dry_run))


def print_diff(canvas, result: RewriteResult):
    if not result.diff:
        return
    canvas.print(Syntax(result.diff, "diff", theme="monokai", word_wrap=True))


def summary_table(summary: RunSummary) -> Table:
    table = Table(title="Codemod results")
    table.add_column("File", style="path", no_wrap=True)
    table.add_column("Status", justify="center")
    table.add_column("Depth", justify="right")
    table.add_column("Imports", justify="right", style="updated")
    table.add_column("Usages", justify="right", style="updated")

    for result in summary.results:
        symbol, style, label = STATUS_SYMBOLS[result.status]
        table.add_row(
            escape(result.target.relative_path),
            f"[{style}]{symbol} {label}[/]",
            "" if result.depth is None else str(result.depth),
            str(result.import_replacements),
            str(result.usage_replacements),
        )
    return table


def render_summary(canvas, summary: RunSummary, show_diff: bool = False, show_table: bool = False):
    for result in summary.results:
        print_result(canvas, result, summary.dry_run)
        if show_diff:
            print_diff(canvas, result)

    if show_table:
        canvas.print()
        canvas.print(summary_table(summary))

    if summary.dry_run:
        canvas.info("Dry run: no files were written")

    line = summary.summary_line()
    if summary.has_errors:
        canvas.warning(line)
    else:
        canvas.success(line)
