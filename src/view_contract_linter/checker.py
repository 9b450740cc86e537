"""
Pylint plugin entry point.

    pylint --load-plugins=view_contract_linter.checker src/
"""

from pylint.lint import PyLinter

from view_contract_linter.infrastructure.di.container import ViewContractContainer
from view_contract_linter.use_cases.checks.contracts import ViewContractChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = ViewContractContainer.get_instance()
    linter.register_checker(
        ViewContractChecker(linter, ast_gateway=container.get_astroid_gateway()))
