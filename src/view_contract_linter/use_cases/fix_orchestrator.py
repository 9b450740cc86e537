"""Use Case: map violation categories to patch recipes and apply them."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from view_contract_linter.domain.constants import (
    CLASS_KEYWORD,
    REQUIRED_BASE,
    STRUCT_KEYWORD,
    TypeIdentity,
)
from view_contract_linter.domain.entities import ViolationCategory
from view_contract_linter.domain.errors import (
    DeclarationNotFoundError,
    FixNotAvailableError,
)
from view_contract_linter.domain.patcher import DeclarationPatcher
from view_contract_linter.domain.registry_types import RuleRegistryEntry
from view_contract_linter.domain.rule_msgs import VIEW_CONTRACT_REGISTRY

if TYPE_CHECKING:
    from view_contract_linter.domain.entities import SourceLocation
    from view_contract_linter.domain.protocols import (
        DocumentProtocol,
        TypeResolverProtocol,
    )
    from view_contract_linter.domain.syntax import DeclarationNode

logger = logging.getLogger(__name__)

Recipe = Callable[["DeclarationNode", "TypeResolverProtocol"], "DeclarationNode"]


class FixOrchestrator:
    """
    One recipe per fixable category; one fix per call.

    MV003 and MV004 have no recipe: asking for them raises instead of
    returning the declaration untouched, so a reported diagnostic never looks
    fixed when it is not.
    """

    def __init__(self, required_base: TypeIdentity = REQUIRED_BASE) -> None:
        self._required_base = required_base
        self._recipes: dict[ViolationCategory, tuple[Recipe, str]] = {
            ViolationCategory.MUST_BE_CLASS: (self._convert_to_class, STRUCT_KEYWORD),
            ViolationCategory.MUST_INHERIT_REQUIRED_BASE: (self._inherit_required_base, CLASS_KEYWORD),
        }

    def has_fix(self, category: ViolationCategory) -> bool:
        return category in self._recipes

    def expected_keyword(self, category: ViolationCategory) -> str:
        """Keyword of the declaration a category's recipe operates on."""
        return self._recipe_for(category)[1]

    def apply_fix(
        self,
        category: ViolationCategory,
        declaration: "DeclarationNode",
        resolver: "TypeResolverProtocol",
    ) -> "DeclarationNode":
        recipe, _ = self._recipe_for(category)
        logger.debug("Applying %s to %s", category.name, declaration.identifier.text)
        return recipe(declaration, resolver)

    def _recipe_for(self, category: ViolationCategory) -> tuple[Recipe, str]:
        try:
            return self._recipes[category]
        except KeyError:
            raise FixNotAvailableError(category.code or category.name) from None

    def _convert_to_class(
        self, declaration: "DeclarationNode", resolver: "TypeResolverProtocol"
    ) -> "DeclarationNode":
        return DeclarationPatcher.convert_value_type_to_reference_type(declaration)

    def _inherit_required_base(
        self, declaration: "DeclarationNode", resolver: "TypeResolverProtocol"
    ) -> "DeclarationNode":
        # Strip an existing base class (never an interface) so slot 0 holds exactly one.
        stripped = DeclarationPatcher.remove_first_base_if_class(declaration, resolver)
        reference = DeclarationPatcher.build_base_reference(*self._required_base)
        return DeclarationPatcher.insert_base_at_front(stripped, reference)


@dataclass(frozen=True)
class FixAction:
    """A fix registered for one diagnostic code."""
    code: str
    title: str
    category: ViolationCategory
    expected_keyword: str

    def apply(
        self,
        document: "DocumentProtocol",
        location: "SourceLocation",
        orchestrator: FixOrchestrator,
    ) -> "DocumentProtocol":
        """Locate the enclosing declaration, patch it, return the new document."""
        declaration = document.find_declaration(location, self.expected_keyword)
        if declaration is None:
            raise DeclarationNotFoundError(str(location), self.expected_keyword)
        patched = orchestrator.apply_fix(self.category, declaration, document.resolver)
        return document.replace(declaration, patched)


class FixRegistry:
    """Fix actions keyed by diagnostic code, built from the diagnostic registry."""

    def __init__(
        self,
        orchestrator: FixOrchestrator,
        registry: Mapping[str, RuleRegistryEntry] = VIEW_CONTRACT_REGISTRY,
    ) -> None:
        self._orchestrator = orchestrator
        self._actions: dict[str, FixAction] = {}
        for code, entry in registry.items():
            category = ViolationCategory.from_code(code)
            if not entry.get("fixable") or not orchestrator.has_fix(category):
                continue
            self._actions[code] = FixAction(
                code=code,
                title=entry.get("fix_title", code),
                category=category,
                expected_keyword=orchestrator.expected_keyword(category),
            )

    def codes(self) -> list[str]:
        return sorted(self._actions)

    def get(self, code: str) -> FixAction:
        action = self._actions.get(code)
        if action is None:
            raise FixNotAvailableError(code)
        return action

    def apply(
        self, code: str, document: "DocumentProtocol", location: "SourceLocation"
    ) -> "DocumentProtocol":
        return self.get(code).apply(document, location, self._orchestrator)
