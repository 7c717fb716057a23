"""Refresh result display for CLI"""

from rich.table import Table

from cookie_refresh import RefreshResult
from proxy.logging_utils import redact_cookie


def show_refresh_result(result: RefreshResult, console):
    """
    Display the outcome of a refresh with every strategy attempt

    Args:
        result: RefreshResult from the orchestrator
        console: Rich console for output
    """
    table = Table(title="Cookie Refresh")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Success", "[green]Yes[/green]" if result.success else "[red]No[/red]")
    if result.success:
        table.add_row("Method", result.method_used or "-")
        table.add_row("New Cookie", redact_cookie(result.new_cookie))
        table.add_row("Length", str(result.length))
    else:
        table.add_row("Reason", result.failure_reason or "unknown")

    if result.identity:
        table.add_row("Username", result.identity.name)
        table.add_row("User ID", str(result.identity.user_id))
        if result.identity.display_name:
            table.add_row("Display Name", result.identity.display_name)

    console.print(table)

    if result.attempts:
        attempts = Table(title="Strategy Attempts")
        attempts.add_column("Strategy", style="cyan")
        attempts.add_column("Result")
        attempts.add_column("Detail")
        for attempt in result.attempts:
            attempts.add_row(
                attempt.strategy,
                "[green]ok[/green]" if attempt.succeeded else "[red]failed[/red]",
                attempt.detail,
            )
        console.print(attempts)
