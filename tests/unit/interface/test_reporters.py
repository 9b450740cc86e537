"""Unit tests for TerminalContractReporter."""

from rich.console import Console

from view_contract_linter.domain.entities import (
    ContractDiagnostic,
    FixOutcome,
    FixReport,
    SourceLocation,
    ViolationCategory,
)
from view_contract_linter.domain.rule_msgs import VIEW_CONTRACT_REGISTRY
from view_contract_linter.interface.reporters import TerminalContractReporter


def _reporter() -> tuple[TerminalContractReporter, Console]:
    console = Console(record=True, width=200)
    return TerminalContractReporter(console), console


def _diagnostic(code: str = "MV002", fixable: bool = True) -> ContractDiagnostic:
    return ContractDiagnostic(
        code=code,
        category=ViolationCategory.from_code(code),
        type_name="HealthBarView",
        message="View 'HealthBarView' must inherit from engine.MonoBehaviour.",
        location=SourceLocation("game/views.py", 12, 0),
        fixable=fixable,
    )


class TestTerminalContractReporter:
    def test_no_diagnostics(self) -> None:
        reporter, console = _reporter()
        reporter.report_diagnostics([])
        assert "No view contract violations found." in console.export_text()

    def test_diagnostic_table(self) -> None:
        reporter, console = _reporter()
        reporter.report_diagnostics([_diagnostic(), _diagnostic("MV003", fixable=False)])
        text = console.export_text()
        assert "View Contract Violations (2)" in text
        assert "MV002" in text and "MV003" in text
        assert "game/views.py:12:0" in text
        assert "auto" in text and "manual" in text

    def test_fix_report(self) -> None:
        reporter, console = _reporter()
        report = FixReport(
            outcomes=(
                FixOutcome(_diagnostic(), applied=True, backup_path="game/views.py.bak"),
                FixOutcome(_diagnostic("MV001"), applied=False, reason="No 'struct' declaration found"),
            ),
            remaining=(_diagnostic("MV004", fixable=False),),
        )
        reporter.report_fixes(report)
        text = console.export_text()
        assert "fixed (backup: game/views.py.bak)" in text
        assert "No 'struct' declaration found" in text
        assert "Applied 1 fix(es)." in text
        assert "Remaining violations:" in text
        assert "MV004" in text

    def test_rules_table(self) -> None:
        reporter, console = _reporter()
        reporter.report_rules(VIEW_CONTRACT_REGISTRY, ["MV001", "MV002"])
        text = console.export_text()
        for expected in ("E9401", "view-must-be-class", "Convert struct to class", "Inherit MonoBehaviour"):
            assert expected in text
