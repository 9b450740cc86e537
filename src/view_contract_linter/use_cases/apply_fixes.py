"""Use Case: Apply Fixes to Source Code."""

import logging
from typing import TYPE_CHECKING, Optional

from view_contract_linter.domain.entities import ContractDiagnostic, FixOutcome, FixReport
from view_contract_linter.domain.errors import ViewContractError

if TYPE_CHECKING:
    from view_contract_linter.domain.protocols import FixerGatewayProtocol, TelemetryPort
    from view_contract_linter.use_cases.check_contract import CheckContractUseCase

logger = logging.getLogger(__name__)


class ApplyFixesUseCase:
    """
    Fix view contract violations file by file.

    A file is re-checked after every write, so each fix sees line numbers
    and declarations from the current text. Every declaration gets at most
    one attempt per diagnostic code. Declarations are keyed by qualified
    name (game.views.Outer.View), which survives the line shift of an
    inserted import.
    """

    def __init__(
        self,
        fixer_gateway: "FixerGatewayProtocol",
        check_use_case: "CheckContractUseCase",
        telemetry: Optional["TelemetryPort"] = None,
        create_backups: bool = False,
    ) -> None:
        self.fixer_gateway = fixer_gateway
        self.check_use_case = check_use_case
        self.telemetry = telemetry
        self.create_backups = create_backups

    def execute(self, target_path: str) -> FixReport:
        outcomes: list[FixOutcome] = []
        remaining: list[ContractDiagnostic] = []
        for file_path in self.check_use_case.target_files(target_path):
            file_outcomes, file_remaining = self.fix_file(file_path)
            outcomes.extend(file_outcomes)
            remaining.extend(file_remaining)
        return FixReport(outcomes=tuple(outcomes), remaining=tuple(remaining))

    def fix_file(
        self, file_path: str
    ) -> tuple[list[FixOutcome], list[ContractDiagnostic]]:
        """Apply fixes to one file until nothing fixable is left untried."""
        outcomes: list[FixOutcome] = []
        attempted: set[tuple[str, str]] = set()
        backed_up = False
        diagnostics = self.check_use_case.check_file(file_path)
        while True:
            candidate = self._next_candidate(diagnostics, attempted)
            if candidate is None:
                break
            attempted.add(self._attempt_key(candidate))
            outcome = self._apply_one(candidate, create_backup=self.create_backups and not backed_up)
            outcomes.append(outcome)
            if not outcome.applied:
                continue
            backed_up = backed_up or outcome.backup_path is not None
            diagnostics = self.check_use_case.check_file(file_path)
        return outcomes, diagnostics

    def _next_candidate(
        self, diagnostics: list[ContractDiagnostic], attempted: set[tuple[str, str]]
    ) -> Optional[ContractDiagnostic]:
        for diagnostic in diagnostics:
            if not diagnostic.fixable:
                continue
            if self._attempt_key(diagnostic) in attempted:
                continue
            return diagnostic
        return None

    @staticmethod
    def _attempt_key(diagnostic: ContractDiagnostic) -> tuple[str, str]:
        return diagnostic.code, diagnostic.qualified_name or diagnostic.type_name

    def _apply_one(self, diagnostic: ContractDiagnostic, create_backup: bool) -> FixOutcome:
        try:
            outcome = self.fixer_gateway.apply_fix(diagnostic, create_backup=create_backup)
        except ViewContractError as exc:
            logger.warning("Fix %s for %s failed: %s", diagnostic.code, diagnostic.type_name, exc)
            if self.telemetry:
                self.telemetry.error(f"{diagnostic.code} {diagnostic.type_name}: {exc}")
            return FixOutcome(diagnostic, applied=False, reason=str(exc))
        if outcome.applied and self.telemetry:
            self.telemetry.step(f"Fixed {diagnostic.code} in {diagnostic.type_name} ({diagnostic.location})")
        return outcome
