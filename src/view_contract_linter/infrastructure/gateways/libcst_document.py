"""LibCST document: locate class declarations and write patched ones back."""

import logging
from typing import Optional, cast

import libcst as cst
from libcst.metadata import MetadataWrapper, PositionProvider

from view_contract_linter.domain.constants import CLASS_KEYWORD, STRUCT_KEYWORD, VALUE_TYPE_BASE_NAME
from view_contract_linter.domain.entities import SourceLocation
from view_contract_linter.domain.errors import InvalidDeclarationError
from view_contract_linter.domain.protocols import DocumentProtocol, TypeResolverProtocol
from view_contract_linter.domain.syntax import BaseList, BaseTypeRef, DeclarationNode, Token
from view_contract_linter.infrastructure.gateways.transformers import EnsureImportTransformer

logger = logging.getLogger(__name__)

_EMPTY_MODULE = cst.Module(body=[])


class ClassDefBridge:
    """Translates between libcst.ClassDef and DeclarationNode."""

    @staticmethod
    def code(node: cst.CSTNode) -> str:
        return _EMPTY_MODULE.code_for_node(node)

    @staticmethod
    def to_reference(arg: cst.Arg) -> BaseTypeRef:
        value = arg.value
        if isinstance(value, cst.Subscript):
            arguments = tuple(
                ClassDefBridge.code(element.slice.value)
                for element in value.slice
                if isinstance(element.slice, cst.Index)
            )
            return BaseTypeRef(ClassDefBridge.code(value.value), arguments, origin=arg)
        return BaseTypeRef(ClassDefBridge.code(value), origin=arg)

    @staticmethod
    def is_value_type_base(reference: BaseTypeRef) -> bool:
        return reference.name.rsplit(".", 1)[-1] == VALUE_TYPE_BASE_NAME

    @staticmethod
    def to_declaration(node: cst.ClassDef) -> DeclarationNode:
        """A class listing NamedTuple among its bases is read as a struct."""
        base_list = None
        if node.bases:
            base_list = BaseList(
                types=tuple(ClassDefBridge.to_reference(arg) for arg in node.bases),
                colon=Token("("),
            )
        type_parameters = getattr(node, "type_parameters", None)
        keyword = CLASS_KEYWORD
        if base_list is not None and any(
                ClassDefBridge.is_value_type_base(ref) for ref in base_list.types):
            keyword = STRUCT_KEYWORD
        return DeclarationNode(
            keyword=Token(keyword, trailing_trivia=node.whitespace_after_class.value),
            identifier=Token(node.name.value, trailing_trivia=node.whitespace_after_name.value),
            attributes=tuple(node.decorators),
            type_parameters=tuple(
                ClassDefBridge.code(p) for p in type_parameters.params
            ) if type_parameters is not None else (),
            base_list=base_list,
            members=tuple(node.body.body),
            open_brace=Token(":", leading_trivia=node.whitespace_before_colon.value),
            origin=node,
        )

    @staticmethod
    def to_expression(reference: BaseTypeRef) -> cst.BaseExpression:
        parts = reference.name.split(".")
        expr: cst.BaseExpression = cst.Name(parts[0])
        for part in parts[1:]:
            expr = cst.Attribute(value=expr, attr=cst.Name(part))
        if reference.type_arguments:
            expr = cst.Subscript(
                value=expr,
                slice=[
                    cst.SubscriptElement(slice=cst.Index(value=cst.parse_expression(a)))
                    for a in reference.type_arguments
                ],
            )
        return expr

    @staticmethod
    def apply(node: cst.ClassDef, declaration: DeclarationNode) -> cst.ClassDef:
        """
        Write the declaration's base list back onto node; everything else is kept.

        A struct must keep a NamedTuple base. A class drops any NamedTuple
        base, which is how a converted struct is spelled in Python.
        """
        references = declaration.base_types
        if declaration.is_value_type:
            if not any(ClassDefBridge.is_value_type_base(ref) for ref in references):
                raise InvalidDeclarationError(
                    f"Struct '{declaration.identifier.text}' needs a "
                    f"{VALUE_TYPE_BASE_NAME} base in Python."
                )
        elif declaration.is_reference_type:
            references = tuple(
                ref for ref in references if not ClassDefBridge.is_value_type_base(ref))
        else:
            raise InvalidDeclarationError(
                f"Python has no '{declaration.keyword.text}' declaration for "
                f"'{declaration.identifier.text}'."
            )
        bases = [
            ref.origin if isinstance(ref.origin, cst.Arg)
            else cst.Arg(value=ClassDefBridge.to_expression(ref))
            for ref in references
        ]
        if not bases and not node.keywords:
            return node.with_changes(
                bases=[], lpar=cst.MaybeSentinel.DEFAULT, rpar=cst.MaybeSentinel.DEFAULT)
        if not node.keywords and node.bases and bases[-1] is not node.bases[-1]:
            # The new last base may still carry the comma that preceded a removed one.
            bases[-1] = bases[-1].with_changes(comma=cst.MaybeSentinel.DEFAULT)
        return node.with_changes(bases=bases)


class LibCSTDocument(DocumentProtocol):
    """An immutable parsed Python file."""

    def __init__(self, path: str, module: cst.Module, resolver: TypeResolverProtocol) -> None:
        self._path = path
        self._module = module
        self._resolver = resolver

    @classmethod
    def from_source(
        cls, path: str, source: str, resolver: TypeResolverProtocol
    ) -> "LibCSTDocument":
        return cls(path, cst.parse_module(source), resolver)

    @property
    def path(self) -> str:
        return self._path

    @property
    def resolver(self) -> TypeResolverProtocol:
        return self._resolver

    @property
    def code(self) -> str:
        return self._module.code

    def find_declaration(
        self, location: SourceLocation, keyword: str
    ) -> Optional[DeclarationNode]:
        """Innermost class statement of the given keyword whose span covers location.line."""
        if keyword not in (CLASS_KEYWORD, STRUCT_KEYWORD):
            logger.debug("No '%s' declarations exist in Python source", keyword)
            return None
        wrapper = MetadataWrapper(self._module, unsafe_skip_copy=True)
        positions = wrapper.resolve(PositionProvider)
        best: Optional[DeclarationNode] = None
        best_start = (-1, -1)
        for node, span in positions.items():
            if not isinstance(node, cst.ClassDef):
                continue
            if not span.start.line <= location.line <= span.end.line:
                continue
            start = (span.start.line, span.start.column)
            if start <= best_start:
                continue
            declaration = ClassDefBridge.to_declaration(node)
            if declaration.keyword.text == keyword:
                best, best_start = declaration, start
        return best

    def replace(self, old: DeclarationNode, new: DeclarationNode) -> "LibCSTDocument":
        if not isinstance(old.origin, cst.ClassDef):
            raise InvalidDeclarationError(
                f"'{old.identifier.text}' was not read from this document.")
        updated = ClassDefBridge.apply(old.origin, new)
        module = cast(cst.Module, self._module.deep_replace(old.origin, updated))
        for ref in new.base_types:
            if ref.origin is None and "." in ref.name:
                module = module.visit(EnsureImportTransformer(ref.name.rsplit(".", 1)[0]))
        return LibCSTDocument(self._path, module, self._resolver)
