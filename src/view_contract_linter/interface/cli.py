"""CLI entry points for the view contract linter - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from view_contract_linter.domain.classifier import ViewContractClassifier
from view_contract_linter.domain.config import ConfigurationLoader
from view_contract_linter.domain.constants import VIEW_CONTRACT_BANNER
from view_contract_linter.domain.protocols import (
    AstroidProtocol,
    FileSystemProtocol,
    FixerGatewayProtocol,
    TelemetryPort,
)
from view_contract_linter.domain.rule_msgs import VIEW_CONTRACT_REGISTRY
from view_contract_linter.interface.reporters import ContractReporter
from view_contract_linter.use_cases.apply_fixes import ApplyFixesUseCase
from view_contract_linter.use_cases.check_contract import CheckContractUseCase
from view_contract_linter.use_cases.fix_orchestrator import FixRegistry

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    reporter: ContractReporter
    astroid_gateway: AstroidProtocol
    filesystem: FileSystemProtocol
    fixer_gateway: FixerGatewayProtocol
    fix_registry: FixRegistry
    classifier: ViewContractClassifier


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def resolve_target_path(path: Optional[Path]) -> str:
        """Resolve target path: explicit path (even '.'), else src/ if exists, else '.'."""
        if path is not None:
            return str(path)
        cwd = Path.cwd()
        src_dir = cwd / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def configure_logging(level: str) -> None:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        logging.getLogger().setLevel(level)

    @staticmethod
    def check_use_case(deps: CLIDependencies) -> CheckContractUseCase:
        return CheckContractUseCase(
            astroid_gateway=deps.astroid_gateway,
            filesystem=deps.filesystem,
            config_loader=deps.config_loader,
            telemetry=deps.telemetry,
            classifier=deps.classifier,
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="view-contract",
            help=f"{VIEW_CONTRACT_BANNER}\nView contract checker and fixer for IView[T] implementations",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Log debug records (overrides log_level)"),
        ) -> None:
            """Check and fix view contract violations."""
            CLIAppFactory.configure_logging("DEBUG" if verbose else deps.config_loader.log_level)

        @app.command()
        def check(
            path: Optional[Path] = typer.Argument(None, help="Path to check (default: src/ if present, else .)"),  # noqa: B008, RUF100
        ) -> None:
            """Report every view contract violation under PATH."""
            deps.telemetry.handshake()
            target_path = CLIAppFactory.resolve_target_path(path)
            diagnostics = CLIAppFactory.check_use_case(deps).execute(target_path)
            deps.reporter.report_diagnostics(diagnostics)
            sys.exit(1 if diagnostics else 0)

        @app.command()
        def fix(
            path: Optional[Path] = typer.Argument(None, help="Path to fix (default: src/ if present, else .)"),  # noqa: B008, RUF100
            backup: Optional[bool] = typer.Option(
                None,
                "--backup/--no-backup",
                help="Keep <file>.bak before the first write (default: create_backups from config)",
            ),
        ) -> None:
            """Apply every registered fix, one per declaration, re-checking between fixes."""
            deps.telemetry.handshake()
            target_path = CLIAppFactory.resolve_target_path(path)
            create_backups = deps.config_loader.create_backups if backup is None else backup
            use_case = ApplyFixesUseCase(
                deps.fixer_gateway,
                CLIAppFactory.check_use_case(deps),
                telemetry=deps.telemetry,
                create_backups=create_backups,
            )
            report = use_case.execute(target_path)
            deps.reporter.report_fixes(report)
            sys.exit(1 if report.has_violations() else 0)

        @app.command()
        def rules() -> None:
            """List diagnostic codes, pylint symbols and available fixes."""
            deps.reporter.report_rules(VIEW_CONTRACT_REGISTRY, deps.fix_registry.codes())

        return app
