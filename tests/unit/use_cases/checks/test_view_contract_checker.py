"""Unit tests for the pylint ViewContractChecker."""

import unittest
from unittest.mock import MagicMock

import astroid

from view_contract_linter.domain.entities import ViolationCategory
from view_contract_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from view_contract_linter.use_cases.checks.contracts import ViewContractChecker


class TestViewContractChecker(unittest.TestCase):
    def setUp(self) -> None:
        self.linter = MagicMock()

    def _messages(self, checker: ViewContractChecker) -> list[tuple[str, object, object]]:
        """(msgid, node, args) for every message forwarded to the linter."""
        return [
            (call.args[0], call.args[2], call.args[3])
            for call in self.linter.add_message.call_args_list
        ]

    def test_declares_all_contract_messages(self) -> None:
        checker = ViewContractChecker(self.linter, ast_gateway=MagicMock())
        self.assertEqual(checker.name, "view-contract")
        self.assertEqual(set(checker.msgs), {"E9401", "E9402", "E9403", "E9404"})

    def test_violation_adds_symbol_with_type_name(self) -> None:
        classifier = MagicMock()
        classifier.classify.return_value = ViolationCategory.MUST_DECLARE_REQUIRED_ATTRIBUTE
        gateway = MagicMock()
        checker = ViewContractChecker(self.linter, ast_gateway=gateway, classifier=classifier)
        node = MagicMock()
        node.name = "ScoreView"

        checker.visit_classdef(node)

        gateway.resolve_class.assert_called_once_with(node)
        self.assertEqual(
            self._messages(checker), [("view-missing-require-component", node, ("ScoreView",))])

    def test_compliant_class_adds_nothing(self) -> None:
        classifier = MagicMock()
        classifier.classify.return_value = ViolationCategory.NONE
        checker = ViewContractChecker(self.linter, ast_gateway=MagicMock(), classifier=classifier)

        checker.visit_classdef(MagicMock())

        self.linter.add_message.assert_not_called()

    def test_real_inference_flags_missing_base(self) -> None:
        module = astroid.parse(
            "from views import IView\n"
            "class Model:\n"
            "    pass\n"
            "class HealthBarView(IView[Model]):\n"
            "    pass\n",
            module_name="pylint_views",
        )
        checker = ViewContractChecker(self.linter, ast_gateway=AstroidGateway())

        for node in module.nodes_of_class(astroid.nodes.ClassDef):
            checker.visit_classdef(node)

        messages = self._messages(checker)
        self.assertEqual(len(messages), 1)
        self.assertEqual(messages[0][0], "view-must-inherit-monobehaviour")
        self.assertEqual(messages[0][2], ("HealthBarView",))
