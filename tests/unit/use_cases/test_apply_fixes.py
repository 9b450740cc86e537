"""Unit tests for ApplyFixesUseCase."""

import unittest
from unittest.mock import MagicMock

from view_contract_linter.domain.entities import (
    ContractDiagnostic,
    FixOutcome,
    SourceLocation,
    ViolationCategory,
)
from view_contract_linter.domain.errors import DeclarationNotFoundError
from view_contract_linter.use_cases.apply_fixes import ApplyFixesUseCase


def diagnostic(
    code: str, type_name: str, line: int = 3, fixable: bool = True, scope: str = "game.views"
) -> ContractDiagnostic:
    return ContractDiagnostic(
        code=code,
        category=ViolationCategory.from_code(code),
        type_name=type_name,
        message=f"{code} {type_name}",
        location=SourceLocation("game/views.py", line, 0),
        fixable=fixable,
        qualified_name=f"{scope}.{type_name}",
    )


class TestApplyFixesUseCase(unittest.TestCase):
    def setUp(self) -> None:
        self.gateway = MagicMock()
        self.check = MagicMock()
        self.check.target_files.return_value = ["game/views.py"]
        self.telemetry = MagicMock()

    def _use_case(self, create_backups: bool = False) -> ApplyFixesUseCase:
        return ApplyFixesUseCase(
            self.gateway, self.check, telemetry=self.telemetry, create_backups=create_backups)

    def test_rechecks_after_each_applied_fix(self) -> None:
        mv002 = diagnostic("MV002", "HealthBarView")
        mv004 = diagnostic("MV004", "HealthBarView", line=4, fixable=False)
        self.check.check_file.side_effect = [[mv002], [mv004]]
        self.gateway.apply_fix.side_effect = lambda d, create_backup: FixOutcome(d, applied=True)

        report = self._use_case().execute("game")

        self.assertEqual([o.diagnostic for o in report.applied], [mv002])
        self.assertEqual(report.remaining, (mv004,))
        self.assertEqual(self.check.check_file.call_count, 2)
        self.gateway.apply_fix.assert_called_once_with(mv002, create_backup=False)

    def test_uses_fresh_diagnostic_for_second_declaration(self) -> None:
        first = diagnostic("MV002", "HealthBarView", line=3)
        second_stale = diagnostic("MV002", "ScoreView", line=8)
        second_fresh = diagnostic("MV002", "ScoreView", line=9)
        self.check.check_file.side_effect = [[first, second_stale], [second_fresh], []]
        self.gateway.apply_fix.side_effect = lambda d, create_backup: FixOutcome(d, applied=True)

        report = self._use_case().execute("game")

        fixed = [call.args[0] for call in self.gateway.apply_fix.call_args_list]
        self.assertEqual(fixed, [first, second_fresh])
        self.assertEqual(report.remaining, ())

    def test_failure_is_reported_and_not_retried(self) -> None:
        mv001 = diagnostic("MV001", "HealthBarView")
        self.check.check_file.return_value = [mv001]
        self.gateway.apply_fix.side_effect = DeclarationNotFoundError("game/views.py:3:0", "struct")

        report = self._use_case().execute("game")

        self.assertEqual(len(report.outcomes), 1)
        outcome = report.outcomes[0]
        self.assertFalse(outcome.applied)
        self.assertIn("struct", outcome.reason or "")
        self.assertEqual(report.remaining, (mv001,))
        self.gateway.apply_fix.assert_called_once()
        self.telemetry.error.assert_called_once()

    def test_backup_only_before_first_write(self) -> None:
        first = diagnostic("MV002", "HealthBarView")
        second = diagnostic("MV002", "ScoreView", line=9)
        self.check.check_file.side_effect = [[first, second], [second], []]
        self.gateway.apply_fix.side_effect = [
            FixOutcome(first, applied=True, backup_path="game/views.py.bak"),
            FixOutcome(second, applied=True),
        ]

        self._use_case(create_backups=True).execute("game")

        flags = [call.kwargs["create_backup"] for call in self.gateway.apply_fix.call_args_list]
        self.assertEqual(flags, [True, False])

    def test_unfixable_only_file_is_left_alone(self) -> None:
        mv003 = diagnostic("MV003", "RawView", fixable=False)
        self.check.check_file.return_value = [mv003]

        report = self._use_case().execute("game")

        self.gateway.apply_fix.assert_not_called()
        self.assertEqual(report.outcomes, ())
        self.assertTrue(report.has_violations())

    def test_same_name_in_other_scope_is_still_attempted(self) -> None:
        outer = diagnostic("MV002", "View", line=4, scope="game.views.HudPanel")
        inner = diagnostic("MV002", "View", line=12, scope="game.views.MenuPanel")
        self.check.check_file.side_effect = [[outer, inner], [inner], []]
        self.gateway.apply_fix.side_effect = lambda d, create_backup: FixOutcome(d, applied=True)

        report = self._use_case().execute("game")

        fixed = [call.args[0] for call in self.gateway.apply_fix.call_args_list]
        self.assertEqual(fixed, [outer, inner])
        self.assertEqual(report.remaining, ())

    def test_shifted_line_does_not_retry_declaration(self) -> None:
        first = diagnostic("MV002", "HealthBarView", line=3)
        shifted = diagnostic("MV002", "HealthBarView", line=4)
        self.check.check_file.side_effect = [[first], [shifted]]
        self.gateway.apply_fix.side_effect = lambda d, create_backup: FixOutcome(d, applied=True)

        report = self._use_case().execute("game")

        self.gateway.apply_fix.assert_called_once_with(first, create_backup=False)
        self.assertEqual(report.remaining, (shifted,))
