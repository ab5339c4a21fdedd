"""Rich table rendering for a single file's verification result."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from package_file_verify.result import CheckResult, VerificationResult

STATUS_ICONS = {
    CheckResult.PASSED: "[green]OK[/green]",
    CheckResult.FAILED: "[red]FAIL[/red]",
    CheckResult.UNSUPPORTED: "[dim]?[/dim]",
}


def build_result_table(result: VerificationResult) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Check", style="cyan", min_width=20)
    table.add_column("Flag", justify="center", width=4)
    table.add_column("Status", justify="center", width=6)

    for flag, check in result.checks():
        table.add_row(flag.label, flag.char_for(check), STATUS_ICONS[check])

    return table


def render_result(
    file_path: str,
    result: VerificationResult,
    console: Console | None = None,
) -> None:
    console = console or Console()
    info = f"File:    {file_path}\nStatus:  {result.to_string()}"
    if result.is_configuration:
        info += "\nType:    configuration file"
    console.print(Panel(info, title="Package File"))
    console.print(build_result_table(result))
    console.print()

    failed = result.failed_checks()
    if not failed:
        summary = "[green bold]NO CHECKS FAILED[/green bold]"
        border_style = "green"
    else:
        names = ", ".join(flag.label for flag in failed)
        summary = f"[red bold]{len(failed)} CHECKS FAILED[/red bold]\n{names}"
        border_style = "red"

    unsupported = sum(1 for _, c in result.checks() if c == CheckResult.UNSUPPORTED)
    stats = f"Failed: {len(failed)}"
    if unsupported > 0:
        stats += f" | Unsupported: {unsupported}"

    console.print(
        Panel(f"{summary}\n{stats}", title="Summary", border_style=border_style)
    )
