"""Tests for AstroidGateway / AstroidResolvedType against real astroid inference."""

from pathlib import Path
from typing import Callable

import astroid
import pytest

from view_contract_linter.domain.entities import (
    PrimitiveArgument,
    TypeKind,
    TypeReferenceArgument,
    UnresolvedArgument,
)
from view_contract_linter.domain.predicates import TypePredicates
from view_contract_linter.domain.syntax import BaseTypeRef
from view_contract_linter.infrastructure.gateways.astroid_gateway import (
    AstroidGateway,
    AstroidTypeResolver,
)

SOURCE = '''\
import enum
from abc import abstractmethod
from typing import Generic, NamedTuple, Protocol, TypeVar

import engine
from views import IView, ViewGameObject


class Model:
    pass


class IClickable(Protocol):
    def click(self) -> None: ...


class Point(NamedTuple):
    x: int


class Color(enum.Enum):
    RED = 1


@engine.RequireComponent(ViewGameObject, "Rigidbody", missing_name)
class ButtonView(engine.MonoBehaviour, IView[Model], IClickable):
    def click(self) -> None:
        pass


class BaseView(engine.MonoBehaviour, IView[Model]):
    @abstractmethod
    def render(self) -> None: ...


T = TypeVar("T")


class IRepository(Generic[T]):
    pass


class ScoreRepository(IRepository[Model]):
    pass


class LoggingMixin:
    pass


class MixedView(LoggingMixin, engine.MonoBehaviour, IView[Model]):
    pass
'''


@pytest.fixture
def gateway() -> AstroidGateway:
    return AstroidGateway()


@pytest.fixture
def module(gateway: AstroidGateway, write_module: Callable[[str, str], Path]) -> astroid.nodes.Module:
    parsed = gateway.parse_file(str(write_module("button_views", SOURCE)))
    assert parsed is not None
    return parsed


def _class(gateway: AstroidGateway, module: astroid.nodes.Module, name: str):
    node = next(n for n in gateway.iter_classes(module) if n.name == name)
    return gateway.resolve_class(node)


class TestParseFile:
    def test_module_name_falls_back_to_stem(self, module: astroid.nodes.Module) -> None:
        assert module.name == "button_views"

    def test_missing_file(self, gateway: AstroidGateway, tmp_path: Path) -> None:
        assert gateway.parse_file(str(tmp_path / "nope.py")) is None

    def test_syntax_error(self, gateway: AstroidGateway, write_module: Callable[[str, str], Path]) -> None:
        assert gateway.parse_file(str(write_module("broken", "class (:\n"))) is None


class TestResolvedTypeKind:
    @pytest.mark.parametrize(
        "name, kind",
        [
            ("Model", TypeKind.CLASS),
            ("IClickable", TypeKind.INTERFACE),
            ("Point", TypeKind.STRUCT),
            ("Color", TypeKind.OTHER),
            ("ButtonView", TypeKind.CLASS),
            ("IRepository", TypeKind.INTERFACE),
            ("ScoreRepository", TypeKind.CLASS),
        ],
    )
    def test_kind(self, gateway: AstroidGateway, module: astroid.nodes.Module, name: str, kind: TypeKind) -> None:
        assert _class(gateway, module, name).kind is kind

    def test_namespace_is_innermost_module_segment(
        self, gateway: AstroidGateway, module: astroid.nodes.Module
    ) -> None:
        assert _class(gateway, module, "Model").namespace == "button_views"


class TestResolvedTypeShape:
    def test_interfaces_keep_type_arguments(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        view = _class(gateway, module, "ButtonView")
        interfaces = {(i.namespace, i.name): i for i in view.interfaces}
        assert set(interfaces) == {("views", "IView"), ("button_views", "IClickable")}
        assert interfaces[("views", "IView")].type_arguments == ("Model",)

    def test_base_chain(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        base = _class(gateway, module, "ButtonView").base_type
        chain = []
        while base is not None:
            chain.append(base.name)
            base = base.base_type
        assert chain[:4] == ["MonoBehaviour", "Behaviour", "Component", "Object"]

    def test_base_chain_reaches_later_bases(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        view = _class(gateway, module, "MixedView")
        assert view.base_type is not None and view.base_type.name == "LoggingMixin"
        assert TypePredicates.is_derived_from(view, "engine", "MonoBehaviour")
        assert not TypePredicates.is_derived_from(_class(gateway, module, "Model"), "engine", "MonoBehaviour")

    def test_generic_base_is_an_interface(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        (interface,) = _class(gateway, module, "ScoreRepository").interfaces
        assert (interface.name, interface.type_arguments) == ("IRepository", ("Model",))

    def test_qualified_name(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        assert _class(gateway, module, "MixedView").qualified_name == "button_views.MixedView"

    def test_decorator_becomes_attribute(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        (attribute,) = _class(gateway, module, "ButtonView").attributes
        assert attribute.attribute_type is not None
        assert (attribute.attribute_type.namespace, attribute.attribute_type.name) == (
            "engine", "RequireComponent")
        reference, primitive, unresolved = attribute.constructor_arguments
        assert isinstance(reference, TypeReferenceArgument)
        assert reference.type.name == "ViewGameObject"
        assert primitive == PrimitiveArgument("Rigidbody")
        assert unresolved == UnresolvedArgument("missing_name")

    def test_abstract_method_makes_class_abstract(
        self, gateway: AstroidGateway, module: astroid.nodes.Module
    ) -> None:
        assert _class(gateway, module, "BaseView").is_abstract
        assert not _class(gateway, module, "ButtonView").is_abstract

    def test_location(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        location = _class(gateway, module, "ButtonView").location
        assert location.path.endswith("button_views.py")
        assert location.line == 26


class TestAstroidTypeResolver:
    def test_dotted_name(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        resolved = AstroidTypeResolver(gateway, module).resolve(BaseTypeRef("engine.MonoBehaviour"))
        assert resolved is not None
        assert (resolved.namespace, resolved.name, resolved.kind) == (
            "engine", "MonoBehaviour", TypeKind.CLASS)

    def test_imported_interface(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        resolved = AstroidTypeResolver(gateway, module).resolve(BaseTypeRef("IView", ("Model",)))
        assert resolved is not None
        assert resolved.kind is TypeKind.INTERFACE
        assert resolved.type_arguments == ("Model",)

    def test_unknown_name(self, gateway: AstroidGateway, module: astroid.nodes.Module) -> None:
        assert AstroidTypeResolver(gateway, module).resolve(BaseTypeRef("Nowhere")) is None
        assert AstroidTypeResolver(gateway, module).resolve(BaseTypeRef("engine.Nowhere")) is None
