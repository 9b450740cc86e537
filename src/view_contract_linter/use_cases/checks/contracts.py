"""View contract checks (E9401-E9404)."""

from typing import TYPE_CHECKING, Optional

import astroid  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from view_contract_linter.domain.classifier import ViewContractClassifier
from view_contract_linter.domain.protocols import AstroidProtocol
from view_contract_linter.domain.rule_msgs import VIEW_CONTRACT_REGISTRY, RuleMsgBuilder


class ViewContractChecker(BaseChecker):
    """E9401-E9404: every IView[T] implementation honours the view contract."""

    name: str = "view-contract"

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: AstroidProtocol,
        classifier: Optional[ViewContractClassifier] = None,
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            VIEW_CONTRACT_REGISTRY, list(VIEW_CONTRACT_REGISTRY))
        super().__init__(linter)
        self._ast_gateway = ast_gateway
        self._classifier = classifier or ViewContractClassifier()

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        category = self._classifier.classify(self._ast_gateway.resolve_class(node))
        if category.code is None:
            return
        entry = RuleMsgBuilder.get_entry(VIEW_CONTRACT_REGISTRY, category.code)
        if entry is None:
            return
        self.add_message(entry["symbol"], node=node, args=(node.name,))
