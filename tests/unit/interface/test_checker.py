"""Tests for the pylint plugin entry point."""

from unittest.mock import MagicMock

from view_contract_linter import checker
from view_contract_linter.infrastructure.di.container import ViewContractContainer
from view_contract_linter.use_cases.checks.contracts import ViewContractChecker


def test_register_adds_view_contract_checker() -> None:
    linter = MagicMock()
    try:
        checker.register(linter)
    finally:
        ViewContractContainer.reset()
    (registered,), _ = linter.register_checker.call_args
    assert isinstance(registered, ViewContractChecker)
