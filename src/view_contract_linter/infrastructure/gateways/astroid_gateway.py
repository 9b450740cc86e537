"""astroid-backed resolution of Python classes into contract types."""

import logging
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

import astroid  # type: ignore[import-untyped]
from astroid import modutils
from pylint.checkers.utils import class_is_abstract

from view_contract_linter.domain.constants import (
    ENUM_QNAMES,
    INTERFACE_BASE_NAMES,
    PROTOCOL_QNAMES,
    VALUE_TYPE_BASE_NAME,
)
from view_contract_linter.domain.entities import (
    AttributeInstance,
    PrimitiveArgument,
    SourceLocation,
    TypedConstant,
    TypeKind,
    TypeReferenceArgument,
    UnresolvedArgument,
)
from view_contract_linter.domain.protocols import AstroidProtocol, TypeResolverProtocol

if TYPE_CHECKING:
    from view_contract_linter.domain.syntax import BaseTypeRef

logger = logging.getLogger(__name__)


class AstroidResolvedType:
    """
    Lazy ResolvedTypeProtocol view of an astroid ClassDef.

    Everything is computed on first access, so self-referencing decorators
    and deep hierarchies cost nothing until a predicate asks.
    """

    def __init__(
        self,
        node: astroid.nodes.ClassDef,
        gateway: "AstroidGateway",
        type_arguments: tuple[str, ...] = (),
        ancestors: Optional[tuple[astroid.nodes.ClassDef, ...]] = None,
    ) -> None:
        self.node = node
        self._gateway = gateway
        self._type_arguments = type_arguments
        self._ancestors = ancestors

    def __repr__(self) -> str:
        return f"AstroidResolvedType({self.node.qname()!r}, {self._type_arguments!r})"

    @property
    def name(self) -> str:
        return str(self.node.name)

    @property
    def qualified_name(self) -> str:
        """Module path plus enclosing scopes (game.views.Outer.View)."""
        return str(self.node.qname())

    @cached_property
    def namespace(self) -> str:
        """Innermost segment of the defining module's dotted name."""
        module_name = str(self.node.root().name or "")
        return module_name.rsplit(".", 1)[-1]

    @property
    def type_arguments(self) -> tuple[str, ...]:
        return self._type_arguments

    @cached_property
    def kind(self) -> TypeKind:
        if self.node.qname() in PROTOCOL_QNAMES:
            return TypeKind.INTERFACE
        base_names = [AstroidGateway.base_name(base) for base in self.node.bases]
        if any(name.rsplit(".", 1)[-1] in INTERFACE_BASE_NAMES for name in base_names):
            return TypeKind.INTERFACE
        if any(name.rsplit(".", 1)[-1] == VALUE_TYPE_BASE_NAME for name in base_names):
            return TypeKind.STRUCT
        try:
            if any(ancestor.qname() in ENUM_QNAMES for ancestor in self.node.ancestors()):
                return TypeKind.OTHER
        except astroid.AstroidError:
            pass
        return TypeKind.CLASS

    @cached_property
    def is_abstract(self) -> bool:
        try:
            return bool(class_is_abstract(self.node))
        except astroid.AstroidError:
            return False

    @cached_property
    def _resolved_bases(self) -> tuple["AstroidResolvedType", ...]:
        resolved = []
        for base in self.node.bases:
            base_type = self._gateway.resolve_expression(base)
            if base_type is not None:
                resolved.append(base_type)
        return tuple(resolved)

    @property
    def interfaces(self) -> tuple["AstroidResolvedType", ...]:
        return tuple(b for b in self._resolved_bases if b.kind is TypeKind.INTERFACE)

    @cached_property
    def _ancestor_chain(self) -> Optional[tuple[astroid.nodes.ClassDef, ...]]:
        if self._ancestors is not None:
            return self._ancestors
        try:
            return tuple(self.node.ancestors())
        except astroid.AstroidError as exc:
            logger.debug("Ancestors of %s not inferred: %s", self.node.qname(), exc)
            return None

    @cached_property
    def base_type(self) -> Optional["AstroidResolvedType"]:
        """
        Next non-interface class among all ancestors, not just the first base.

        A view deriving from MonoBehaviour through its second base
        (``class V(Mixin, engine.MonoBehaviour, IView[M])``) still has
        MonoBehaviour on its chain. Each link carries the rest of this
        class's ancestors, so walking the chain visits every ancestor once.
        """
        chain = self._ancestor_chain
        if chain is None:
            return next(
                (b for b in self._resolved_bases if b.kind is not TypeKind.INTERFACE), None)
        for index, ancestor in enumerate(chain):
            candidate = AstroidResolvedType(
                ancestor, self._gateway, ancestors=chain[index + 1:])
            if candidate.kind is not TypeKind.INTERFACE:
                return candidate
        return None

    @cached_property
    def attributes(self) -> tuple[AttributeInstance, ...]:
        decorators = self.node.decorators
        if decorators is None:
            return ()
        return tuple(self._gateway.resolve_decorator(d) for d in decorators.nodes)

    @cached_property
    def location(self) -> SourceLocation:
        root = self.node.root()
        return SourceLocation(
            path=str(getattr(root, "file", "") or ""),
            line=int(self.node.lineno or 0),
            column=int(self.node.col_offset or 0),
        )


class AstroidGateway(AstroidProtocol):
    """AST intelligence gateway: inference of bases, decorators and decorator arguments."""

    def clear_inference_cache(self) -> None:
        """Clear the astroid inference cache to force fresh inference after code changes."""
        astroid.MANAGER.clear_cache()

    def parse_file(self, file_path: str) -> Optional[astroid.nodes.Module]:
        """Parse a file and return the astroid Module node."""
        path = Path(file_path)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot read %s: %s", file_path, exc)
            return None
        try:
            module_name = ".".join(modutils.modpath_from_file(str(path)))
        except ImportError:
            module_name = path.stem
        try:
            return astroid.parse(source, module_name=module_name, path=str(path))
        except astroid.AstroidSyntaxError as exc:
            logger.warning("Cannot parse %s: %s", file_path, exc)
            return None

    def iter_classes(self, module: astroid.nodes.Module) -> Iterator[astroid.nodes.ClassDef]:
        yield from module.nodes_of_class(astroid.nodes.ClassDef)

    def resolve_class(
        self, node: astroid.nodes.ClassDef, type_arguments: tuple[str, ...] = ()
    ) -> AstroidResolvedType:
        return AstroidResolvedType(node, self, type_arguments)

    def resolve_expression(self, expr: astroid.nodes.NodeNG) -> Optional[AstroidResolvedType]:
        """Infer a type expression, keeping subscript arguments (IView[Model])."""
        type_arguments: tuple[str, ...] = ()
        target = expr
        if isinstance(expr, astroid.nodes.Subscript):
            target = expr.value
            type_arguments = AstroidGateway.subscript_arguments(expr)
        inferred = self._infer_first(target)
        if isinstance(inferred, astroid.nodes.ClassDef):
            return self.resolve_class(inferred, type_arguments)
        return None

    def resolve_decorator(self, decorator: astroid.nodes.NodeNG) -> AttributeInstance:
        """A decorator is an attribute; call arguments are its constructor arguments."""
        func = decorator
        args: list[astroid.nodes.NodeNG] = []
        if isinstance(decorator, astroid.nodes.Call):
            func = decorator.func
            args = list(decorator.args)
        return AttributeInstance(
            attribute_type=self.resolve_expression(func),
            constructor_arguments=tuple(self.resolve_argument(a) for a in args),
        )

    def resolve_argument(self, arg: astroid.nodes.NodeNG) -> TypedConstant:
        inferred = self._infer_first(arg)
        if isinstance(inferred, astroid.nodes.ClassDef):
            return TypeReferenceArgument(self.resolve_class(inferred))
        if isinstance(inferred, astroid.nodes.Const):
            return PrimitiveArgument(inferred.value)
        return UnresolvedArgument(arg.as_string())

    def resolve_name(
        self,
        module: astroid.nodes.Module,
        dotted_name: str,
        type_arguments: tuple[str, ...] = (),
    ) -> Optional[AstroidResolvedType]:
        """Look a dotted name up from module scope (engine.MonoBehaviour, Widget)."""
        head, *attributes = dotted_name.split(".")
        try:
            current = next(
                (v for v in module.ilookup(head) if v is not astroid.Uninferable), None)
            for attribute in attributes:
                if current is None:
                    return None
                current = next(
                    (v for v in current.igetattr(attribute) if v is not astroid.Uninferable), None)
        except astroid.AstroidError as exc:
            logger.debug("Lookup of %s failed: %s", dotted_name, exc)
            return None
        if isinstance(current, astroid.nodes.ClassDef):
            return self.resolve_class(current, type_arguments)
        return None

    @staticmethod
    def base_name(expr: astroid.nodes.NodeNG) -> str:
        """Source spelling of a base without its subscript."""
        if isinstance(expr, astroid.nodes.Subscript):
            expr = expr.value
        return str(expr.as_string())

    @staticmethod
    def subscript_arguments(expr: astroid.nodes.Subscript) -> tuple[str, ...]:
        slice_node = expr.slice
        if isinstance(slice_node, astroid.nodes.Tuple):
            return tuple(str(e.as_string()) for e in slice_node.elts)
        return (str(slice_node.as_string()),)

    @staticmethod
    def _infer_first(node: astroid.nodes.NodeNG) -> Optional[astroid.nodes.NodeNG]:
        try:
            for inferred in node.infer():
                if inferred is not astroid.Uninferable:
                    return inferred
        except astroid.InferenceError:
            pass
        return None


class AstroidTypeResolver(TypeResolverProtocol):
    """Resolves base-list references against one module's scope."""

    def __init__(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        self._gateway = gateway
        self._module = module

    def resolve(self, reference: "BaseTypeRef") -> Optional[AstroidResolvedType]:
        return self._gateway.resolve_name(
            self._module, reference.name, reference.type_arguments)
