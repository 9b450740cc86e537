"""Pytest configuration: stub contract modules for astroid-backed tests.

The view contract names types by their innermost module, so real ``engine``
and ``views`` modules must be importable while astroid infers bases and
decorators. A session fixture writes small stand-ins to a temp dir on
sys.path.
"""

import sys
from pathlib import Path
from typing import Callable, Iterator

import astroid
import pytest

ENGINE_STUB = '''\
class Object:
    pass


class Component(Object):
    pass


class Behaviour(Component):
    pass


class MonoBehaviour(Behaviour):
    pass


class Attribute:
    pass


class RequireComponent(Attribute):
    def __init__(self, *component_types):
        self.component_types = component_types

    def __call__(self, cls):
        return cls
'''

VIEWS_STUB = '''\
from typing import Protocol, TypeVar

import engine

T = TypeVar("T")


class IView(Protocol[T]):
    def bind(self, model: T) -> None: ...


class ViewGameObject(engine.MonoBehaviour):
    pass
'''


@pytest.fixture(scope="session", autouse=True)
def contract_stub_modules(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    stub_dir = tmp_path_factory.mktemp("contract_stubs")
    (stub_dir / "engine.py").write_text(ENGINE_STUB, encoding="utf-8")
    (stub_dir / "views.py").write_text(VIEWS_STUB, encoding="utf-8")
    sys.path.insert(0, str(stub_dir))
    astroid.MANAGER.clear_cache()
    yield stub_dir
    sys.path.remove(str(stub_dir))
    astroid.MANAGER.clear_cache()


@pytest.fixture
def write_module(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write source to <tmp_path>/<name>.py and return the path."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / f"{name}.py"
        path.write_text(source, encoding="utf-8")
        return path

    return _write
