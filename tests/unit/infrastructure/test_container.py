"""Tests for ViewContractContainer wiring."""

import unittest

from view_contract_linter.domain.config import ConfigurationLoader
from view_contract_linter.infrastructure.di.container import ViewContractContainer
from view_contract_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from view_contract_linter.infrastructure.gateways.libcst_fixer_gateway import LibCSTFixerGateway
from view_contract_linter.interface.telemetry import ProjectTelemetry


class TestViewContractContainer(unittest.TestCase):
    def tearDown(self) -> None:
        ViewContractContainer.reset()

    def test_defaults_are_registered(self) -> None:
        container = ViewContractContainer({"create_backups": True})
        self.assertIsInstance(container.get_config_loader(), ConfigurationLoader)
        self.assertTrue(container.get_config_loader().create_backups)
        self.assertIsInstance(container.get_astroid_gateway(), AstroidGateway)
        self.assertIsInstance(container.get_fixer_gateway(), LibCSTFixerGateway)
        self.assertIsInstance(container.get_telemetry_port(), ProjectTelemetry)
        self.assertEqual(container.get_fix_registry().codes(), ["MV001", "MV002"])

    def test_unknown_key_raises(self) -> None:
        with self.assertRaises(ValueError):
            ViewContractContainer({}).get("Nope")

    def test_register_singleton_overrides(self) -> None:
        container = ViewContractContainer({})
        replacement = object()
        container.register_singleton("TelemetryPort", replacement)
        self.assertIs(container.get_telemetry_port(), replacement)

    def test_get_instance_is_shared(self) -> None:
        self.assertIs(ViewContractContainer.get_instance(), ViewContractContainer.get_instance())
