"""View contract classifier (MV001-MV004)."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from view_contract_linter.domain.constants import (
    COMPANION_TYPE,
    MARKER_INTERFACE,
    REQUIRED_ATTRIBUTE,
    REQUIRED_BASE,
    SEVERITY_ERROR,
)
from view_contract_linter.domain.entities import (
    ContractDiagnostic,
    TypeKind,
    ViolationCategory,
)
from view_contract_linter.domain.predicates import TypePredicates
from view_contract_linter.domain.registry_types import RuleRegistryEntry
from view_contract_linter.domain.rule_msgs import VIEW_CONTRACT_REGISTRY, RuleMsgBuilder

if TYPE_CHECKING:
    from view_contract_linter.domain.protocols import ResolvedTypeProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationStep:
    """One row of the precedence table: when guard holds, the result is final."""
    description: str
    guard: Callable[["ResolvedTypeProtocol"], bool]
    result: ViolationCategory


class ViewContractClassifier:
    """
    Decides the single violation category of a type.

    Rows are evaluated top to bottom and the first matching guard wins, so a
    type that matches an early row is never looked at by later rows. A type
    that falls through every row is compliant.
    """

    STEPS: tuple[ClassificationStep, ...] = (
        ClassificationStep(
            "does not implement the marker interface",
            lambda t: not TypePredicates.implements_interface(t, *MARKER_INTERFACE),
            ViolationCategory.NONE,
        ),
        ClassificationStep(
            "implements the unparameterized marker interface",
            lambda t: TypePredicates.implements_unparameterized_interface(t, *MARKER_INTERFACE),
            ViolationCategory.REDUNDANT_BASE_INTERFACE_PARAMETERIZATION,
        ),
        ClassificationStep(
            "is not a class",
            lambda t: t.kind is not TypeKind.CLASS,
            ViolationCategory.MUST_BE_CLASS,
        ),
        ClassificationStep(
            "is abstract",
            lambda t: t.is_abstract,
            ViolationCategory.NONE,
        ),
        ClassificationStep(
            "does not derive from the required base",
            lambda t: not TypePredicates.is_derived_from(t, *REQUIRED_BASE),
            ViolationCategory.MUST_INHERIT_REQUIRED_BASE,
        ),
        ClassificationStep(
            "lacks the dependency attribute",
            lambda t: not TypePredicates.has_attribute_referencing_type(
                t, *REQUIRED_ATTRIBUTE, *COMPANION_TYPE
            ),
            ViolationCategory.MUST_DECLARE_REQUIRED_ATTRIBUTE,
        ),
    )

    def __init__(
        self, registry: Mapping[str, RuleRegistryEntry] = VIEW_CONTRACT_REGISTRY
    ) -> None:
        self._registry = registry

    def classify(self, type_: "ResolvedTypeProtocol") -> ViolationCategory:
        for step in self.STEPS:
            if step.guard(type_):
                logger.debug("%s.%s %s -> %s", type_.namespace,
                             type_.name, step.description, step.result.name)
                return step.result
        return ViolationCategory.NONE

    def diagnose(self, type_: "ResolvedTypeProtocol") -> Optional[ContractDiagnostic]:
        """Classify and wrap a violation into a reportable diagnostic."""
        category = self.classify(type_)
        code = category.code
        if code is None:
            return None
        entry = RuleMsgBuilder.get_entry(self._registry, code) or {}
        return ContractDiagnostic(
            code=code,
            category=category,
            type_name=type_.name,
            message=RuleMsgBuilder.format_message(self._registry, code, type_.name),
            location=type_.location,
            severity=SEVERITY_ERROR,
            fixable=bool(entry.get("fixable", False)),
            qualified_name=type_.qualified_name,
        )
