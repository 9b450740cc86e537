from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Sequence

if TYPE_CHECKING:
    import astroid

    from view_contract_linter.domain.entities import (
        AttributeInstance,
        ContractDiagnostic,
        FixOutcome,
        SourceLocation,
        TypeKind,
    )
    from view_contract_linter.domain.syntax import BaseTypeRef, DeclarationNode


class ResolvedTypeProtocol(Protocol):
    """What the domain reads from a bound type. Hosts may compute these lazily."""

    @property
    def name(self) -> str: ...
    @property
    def namespace(self) -> str: ...
    @property
    def qualified_name(self) -> str: ...
    @property
    def kind(self) -> "TypeKind": ...
    @property
    def is_abstract(self) -> bool: ...
    @property
    def interfaces(self) -> Sequence["ResolvedTypeProtocol"]: ...
    @property
    def base_type(self) -> Optional["ResolvedTypeProtocol"]: ...
    @property
    def type_arguments(self) -> Sequence[str]: ...
    @property
    def attributes(self) -> Sequence["AttributeInstance"]: ...
    @property
    def location(self) -> Optional["SourceLocation"]: ...


class TypeResolverProtocol(Protocol):
    """Binds a base-list entry to a type. Returns None when it cannot."""

    def resolve(self, reference: "BaseTypeRef") -> Optional[ResolvedTypeProtocol]:
        ...


class DocumentProtocol(Protocol):
    """A parsed document that can locate declarations and swap them out."""

    @property
    def path(self) -> str: ...

    @property
    def resolver(self) -> TypeResolverProtocol: ...

    def find_declaration(
        self, location: "SourceLocation", keyword: str
    ) -> Optional["DeclarationNode"]:
        """Return the innermost declaration spelled with keyword enclosing location."""
        ...

    def replace(
        self, old: "DeclarationNode", new: "DeclarationNode"
    ) -> "DocumentProtocol":
        """Return a new document with old substituted by new."""
        ...

    @property
    def code(self) -> str: ...


class AstroidProtocol(Protocol):
    def parse_file(self, file_path: str) -> Optional["astroid.nodes.Module"]:
        """Parse a file and return the astroid Module node."""
        ...

    def resolve_class(self, node: "astroid.nodes.ClassDef") -> ResolvedTypeProtocol:
        ...

    def iter_classes(
        self, module: "astroid.nodes.Module"
    ) -> Iterable["astroid.nodes.ClassDef"]:
        ...

    def clear_inference_cache(self) -> None:
        """Clear the astroid inference cache to force fresh inference after code changes."""
        ...


class FixerGatewayProtocol(Protocol):
    """Applies one registered fix for a diagnostic to the file it points at."""

    def apply_fix(
        self, diagnostic: "ContractDiagnostic", create_backup: bool = False
    ) -> "FixOutcome":
        """Apply the fix to the file on disk and report what happened."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def glob_python_files(self, path: str) -> list[str]:
        """Get all Python files in path (recursive if directory)."""
        ...

    def read_text(self, path: str) -> str:
        ...

    def write_text(self, path: str, content: str) -> None:
        ...

    def copy_file(self, source: str, destination: str) -> None:
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...
