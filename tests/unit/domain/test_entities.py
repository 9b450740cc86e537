"""Unit tests for domain entities."""

import pytest

from view_contract_linter.domain.entities import (
    ContractDiagnostic,
    FixOutcome,
    FixReport,
    SourceLocation,
    ViolationCategory,
)


def _diagnostic(code: str = "MV002") -> ContractDiagnostic:
    return ContractDiagnostic(
        code=code,
        category=ViolationCategory.from_code(code),
        type_name="HealthBarView",
        message="View 'HealthBarView' must inherit from engine.MonoBehaviour.",
        location=SourceLocation("game/views.py", 4, 0),
        fixable=True,
    )


def test_violation_category_codes() -> None:
    assert ViolationCategory.NONE.code is None
    assert ViolationCategory.MUST_BE_CLASS.code == "MV001"
    assert ViolationCategory.from_code("MV004") is ViolationCategory.MUST_DECLARE_REQUIRED_ATTRIBUTE


def test_from_code_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        ViolationCategory.from_code("MV999")


def test_source_location_str() -> None:
    assert str(SourceLocation("game/views.py", 4, 2)) == "game/views.py:4:2"


def test_diagnostic_to_dict() -> None:
    data = _diagnostic().to_dict()
    assert data["code"] == "MV002"
    assert data["category"] == "MUST_INHERIT_REQUIRED_BASE"
    assert data["location"] == "game/views.py:4:0"
    assert data["severity"] == "error"


def test_fix_report_partitions_outcomes() -> None:
    applied = FixOutcome(_diagnostic(), applied=True)
    failed = FixOutcome(_diagnostic("MV001"), applied=False, reason="No 'struct' declaration found")
    report = FixReport(outcomes=(applied, failed), remaining=(_diagnostic("MV004"),))
    assert report.applied == (applied,)
    assert report.failed == (failed,)
    assert report.has_violations()
    assert not FixReport().has_violations()
