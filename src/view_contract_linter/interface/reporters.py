"""Terminal reporting of diagnostics, fix results and the rule registry."""

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from view_contract_linter.domain.entities import ContractDiagnostic, FixReport
    from view_contract_linter.domain.registry_types import RuleRegistryEntry


class ContractReporter(Protocol):
    """Protocol for reporting check and fix results to the user."""

    def report_diagnostics(self, diagnostics: Sequence["ContractDiagnostic"]) -> None: ...

    def report_fixes(self, report: "FixReport") -> None: ...

    def report_rules(
        self, registry: Mapping[str, "RuleRegistryEntry"], fix_codes: Iterable[str]
    ) -> None: ...


class TerminalContractReporter:
    """Terminal reporter using rich tables."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def report_diagnostics(self, diagnostics: Sequence["ContractDiagnostic"]) -> None:
        if not diagnostics:
            self.console.print("[green]No view contract violations found.[/green]")
            return
        table = Table(title=f"View Contract Violations ({len(diagnostics)})")
        table.add_column("Code", style="bold red", no_wrap=True)
        table.add_column("Type", style="cyan")
        table.add_column("Location")
        table.add_column("Message")
        table.add_column("Fix", justify="center")
        for diagnostic in diagnostics:
            table.add_row(
                diagnostic.code,
                diagnostic.type_name,
                str(diagnostic.location) if diagnostic.location else "N/A",
                escape(diagnostic.message),
                "auto" if diagnostic.fixable else "manual",
            )
        self.console.print(table)

    def report_fixes(self, report: "FixReport") -> None:
        if report.outcomes:
            table = Table(title="Fix Results")
            table.add_column("Code", no_wrap=True)
            table.add_column("Type", style="cyan")
            table.add_column("Location")
            table.add_column("Result")
            for outcome in report.outcomes:
                diagnostic = outcome.diagnostic
                result = "[green]fixed[/green]" if outcome.applied else f"[red]{escape(outcome.reason or 'not applied')}[/red]"
                if outcome.backup_path:
                    result += f" (backup: {outcome.backup_path})"
                table.add_row(
                    diagnostic.code,
                    diagnostic.type_name,
                    str(diagnostic.location) if diagnostic.location else "N/A",
                    result,
                )
            self.console.print(table)
        self.console.print(f"Applied {len(report.applied)} fix(es).")
        if report.remaining:
            self.console.print("[bold]Remaining violations:[/bold]")
            self.report_diagnostics(report.remaining)

    def report_rules(
        self, registry: Mapping[str, "RuleRegistryEntry"], fix_codes: Iterable[str]
    ) -> None:
        fixable = set(fix_codes)
        table = Table(title="View Contract Rules")
        table.add_column("Code", no_wrap=True)
        table.add_column("Pylint id", no_wrap=True)
        table.add_column("Symbol")
        table.add_column("Title")
        table.add_column("Fix")
        for code in sorted(registry):
            entry = registry[code]
            table.add_row(
                code,
                entry.get("msgid", ""),
                entry.get("symbol", ""),
                entry.get("display_name", ""),
                entry.get("fix_title", "") if code in fixable else "-",
            )
        self.console.print(table)
