from typing import TYPE_CHECKING, Any, Optional, cast

from rich.console import Console

from view_contract_linter.domain.classifier import ViewContractClassifier
from view_contract_linter.domain.config import ConfigurationLoader
from view_contract_linter.infrastructure.config_file_loader import ConfigFileLoader
from view_contract_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from view_contract_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from view_contract_linter.infrastructure.gateways.libcst_fixer_gateway import LibCSTFixerGateway
from view_contract_linter.interface.reporters import TerminalContractReporter
from view_contract_linter.interface.telemetry import ProjectTelemetry
from view_contract_linter.use_cases.fix_orchestrator import FixOrchestrator, FixRegistry

if TYPE_CHECKING:
    from view_contract_linter.domain.protocols import (
        AstroidProtocol,
        FileSystemProtocol,
        FixerGatewayProtocol,
        TelemetryPort,
    )
    from view_contract_linter.interface.reporters import ContractReporter


class ViewContractContainer:
    """Dependency Injection Container for the view contract linter."""

    _instance: Optional["ViewContractContainer"] = None

    def __init__(self, config_dict: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))

        telemetry = ProjectTelemetry("VIEW CONTRACT", "cyan", "View contract checker ready")
        self.register_singleton("TelemetryPort", telemetry)
        astroid_gateway = AstroidGateway()
        self.register_singleton("AstroidGateway", astroid_gateway)
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("ViewContractClassifier", ViewContractClassifier())

        fix_registry = FixRegistry(FixOrchestrator())
        self.register_singleton("FixRegistry", fix_registry)
        self.register_singleton(
            "LibCSTFixerGateway",
            LibCSTFixerGateway(fix_registry, astroid_gateway, filesystem),
        )
        self.register_singleton("ContractReporter", TerminalContractReporter(Console()))

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_astroid_gateway(self) -> "AstroidProtocol":
        """Return the Astroid gateway."""
        return cast("AstroidProtocol", self.get("AstroidGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_classifier(self) -> ViewContractClassifier:
        return cast(ViewContractClassifier, self.get("ViewContractClassifier"))

    def get_fix_registry(self) -> FixRegistry:
        return cast(FixRegistry, self.get("FixRegistry"))

    def get_fixer_gateway(self) -> "FixerGatewayProtocol":
        """Return the LibCST fixer gateway."""
        return cast("FixerGatewayProtocol", self.get("LibCSTFixerGateway"))

    def get_reporter(self) -> "ContractReporter":
        """Return the terminal reporter."""
        return cast("ContractReporter", self.get("ContractReporter"))

    @classmethod
    def get_instance(cls) -> "ViewContractContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = ViewContractContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
