"""Structural edits on DeclarationNode. Every operation returns a new node."""

import dataclasses
import logging
from typing import TYPE_CHECKING, Optional

from view_contract_linter.domain.constants import CLASS_KEYWORD
from view_contract_linter.domain.entities import TypeKind
from view_contract_linter.domain.errors import InvalidDeclarationError
from view_contract_linter.domain.syntax import BaseList, BaseTypeRef, DeclarationNode

if TYPE_CHECKING:
    from view_contract_linter.domain.protocols import TypeResolverProtocol

logger = logging.getLogger(__name__)


class DeclarationPatcher:
    """
    Base-list and keyword edits that leave every other part of a declaration alone.

    Base classes precede interfaces in a base list. The patcher relies on
    that ordering and does not enforce it.
    """

    @staticmethod
    def normalize_base_list(base_list: Optional[BaseList]) -> Optional[BaseList]:
        """An empty base list is spelled as no base list at all."""
        if base_list is None or len(base_list) == 0:
            return None
        return base_list

    @staticmethod
    def build_base_reference(namespace: str, type_name: str) -> BaseTypeRef:
        """Fully qualified reference to namespace.type_name."""
        return BaseTypeRef(name=f"{namespace}.{type_name}")

    @staticmethod
    def remove_first_base_if_class(
        declaration: DeclarationNode, resolver: "TypeResolverProtocol"
    ) -> DeclarationNode:
        """Drop the first base entry when it resolves to anything but an interface."""
        base_list = declaration.base_list
        if base_list is None or not base_list.types:
            return declaration
        first = base_list.types[0]
        resolved = resolver.resolve(first)
        if resolved is None:
            logger.debug("Base %s of %s did not resolve; leaving base list alone",
                         first, declaration.identifier.text)
            return declaration
        if resolved.kind is TypeKind.INTERFACE:
            return declaration
        remaining = dataclasses.replace(base_list, types=base_list.types[1:])
        logger.debug("Removed base %s from %s", first, declaration.identifier.text)
        return dataclasses.replace(
            declaration,
            base_list=DeclarationPatcher.normalize_base_list(remaining),
        )

    @staticmethod
    def insert_base_at_front(
        declaration: DeclarationNode, reference: BaseTypeRef
    ) -> DeclarationNode:
        """Put reference at index 0, shifting the existing entries right."""
        existing = declaration.base_list or BaseList()
        base_list = dataclasses.replace(existing, types=(reference, *existing.types))
        return dataclasses.replace(declaration, base_list=base_list)

    @staticmethod
    def convert_value_type_to_reference_type(declaration: DeclarationNode) -> DeclarationNode:
        """Swap the struct keyword for class; trivia and every child stay as they are."""
        if not declaration.is_value_type:
            raise InvalidDeclarationError(
                f"'{declaration.identifier.text}' is declared with "
                f"'{declaration.keyword.text}', not as a value type."
            )
        return dataclasses.replace(
            declaration, keyword=declaration.keyword.with_text(CLASS_KEYWORD)
        )
