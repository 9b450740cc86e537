"""Use Case: classify every class under a path against the view contract."""

import logging
from typing import TYPE_CHECKING, Optional

from view_contract_linter.domain.classifier import ViewContractClassifier
from view_contract_linter.domain.entities import ContractDiagnostic

if TYPE_CHECKING:
    from view_contract_linter.domain.config import ConfigurationLoader
    from view_contract_linter.domain.protocols import (
        AstroidProtocol,
        FileSystemProtocol,
        TelemetryPort,
    )

logger = logging.getLogger(__name__)


class CheckContractUseCase:
    """Walk Python files, resolve each class with astroid, collect diagnostics."""

    def __init__(
        self,
        astroid_gateway: "AstroidProtocol",
        filesystem: "FileSystemProtocol",
        config_loader: "ConfigurationLoader",
        telemetry: Optional["TelemetryPort"] = None,
        classifier: Optional[ViewContractClassifier] = None,
    ) -> None:
        self.astroid_gateway = astroid_gateway
        self.filesystem = filesystem
        self.config_loader = config_loader
        self.telemetry = telemetry
        self.classifier = classifier or ViewContractClassifier()

    def target_files(self, target_path: str) -> list[str]:
        files = []
        for file_path in self.filesystem.glob_python_files(target_path):
            if self.config_loader.is_excluded(file_path):
                logger.debug("Skipping excluded %s", file_path)
                continue
            files.append(file_path)
        return files

    def execute(self, target_path: str) -> list[ContractDiagnostic]:
        files = self.target_files(target_path)
        if self.telemetry:
            self.telemetry.step(f"Checking {len(files)} file(s) under {target_path}...")
        diagnostics: list[ContractDiagnostic] = []
        for file_path in files:
            diagnostics.extend(self.check_file(file_path))
        return diagnostics

    def check_file(self, file_path: str) -> list[ContractDiagnostic]:
        """Diagnostics for one file, in source order. Unparseable files yield none."""
        module = self.astroid_gateway.parse_file(file_path)
        if module is None:
            if self.telemetry:
                self.telemetry.warning(f"Skipped {file_path}: cannot be parsed.")
            return []
        diagnostics = []
        for node in self.astroid_gateway.iter_classes(module):
            diagnostic = self.classifier.diagnose(self.astroid_gateway.resolve_class(node))
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics
