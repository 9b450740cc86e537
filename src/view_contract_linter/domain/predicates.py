"""Pure type predicates the classifier is built from. No I/O, no mutation."""

from typing import TYPE_CHECKING, Optional

from view_contract_linter.domain.entities import TypeReferenceArgument

if TYPE_CHECKING:
    from view_contract_linter.domain.protocols import ResolvedTypeProtocol


class TypePredicates:
    """
    Identity checks over resolved types.

    An unresolved (None) type or chain entry matches nothing. No top-level
    functions: everything hangs off this class.
    """

    @staticmethod
    def is_exact_type(
        symbol: Optional["ResolvedTypeProtocol"], namespace: str, name: str
    ) -> bool:
        """True when symbol is exactly (namespace, name); no chain walk."""
        if symbol is None:
            return False
        return symbol.name == name and symbol.namespace == namespace

    @staticmethod
    def is_derived_from(
        type_: Optional["ResolvedTypeProtocol"], namespace: str, name: str
    ) -> bool:
        """Walk the base chain starting at type_ itself."""
        current = type_
        while current is not None:
            if TypePredicates.is_exact_type(current, namespace, name):
                return True
            current = current.base_type
        return False

    @staticmethod
    def implements_interface(
        type_: Optional["ResolvedTypeProtocol"], namespace: str, name: str
    ) -> bool:
        """
        True when a declared interface is, or extends, (namespace, name).

        Interfaces extending interfaces are followed transitively; an
        interface's parents live in its own ``interfaces``.
        """
        if type_ is None:
            return False
        for interface in type_.interfaces:
            if TypePredicates.is_derived_from(interface, namespace, name):
                return True
            if TypePredicates.implements_interface(interface, namespace, name):
                return True
        return False

    @staticmethod
    def implements_unparameterized_interface(
        type_: Optional["ResolvedTypeProtocol"], namespace: str, name: str
    ) -> bool:
        """True when the raw, argument-less form is declared directly."""
        if type_ is None:
            return False
        for interface in type_.interfaces:
            if TypePredicates.is_exact_type(interface, namespace, name) and not interface.type_arguments:
                return True
        return False

    @staticmethod
    def has_attribute_referencing_type(
        type_: Optional["ResolvedTypeProtocol"],
        attribute_namespace: str,
        attribute_name: str,
        referenced_namespace: str,
        referenced_name: str,
    ) -> bool:
        """
        True when an attribute deriving from the attribute target is given
        a type argument deriving from the referenced target.
        """
        if type_ is None:
            return False
        for attribute in type_.attributes:
            if not TypePredicates.is_derived_from(
                attribute.attribute_type, attribute_namespace, attribute_name
            ):
                continue
            for argument in attribute.constructor_arguments:
                # Primitive and unresolved arguments never match.
                if not isinstance(argument, TypeReferenceArgument):
                    continue
                if TypePredicates.is_derived_from(
                    argument.type, referenced_namespace, referenced_name
                ):
                    return True
        return False
