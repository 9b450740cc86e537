from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class TypeKind(Enum):
    """Declaration kind of a resolved type."""
    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    OTHER = "other"


class ViolationCategory(Enum):
    """Mutually exclusive outcomes of classifying one type against the view contract."""
    NONE = "none"
    MUST_BE_CLASS = "MV001"
    MUST_INHERIT_REQUIRED_BASE = "MV002"
    REDUNDANT_BASE_INTERFACE_PARAMETERIZATION = "MV003"
    MUST_DECLARE_REQUIRED_ATTRIBUTE = "MV004"

    @property
    def code(self) -> Optional[str]:
        """Stable diagnostic code, or None for a compliant type."""
        if self is ViolationCategory.NONE:
            return None
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "ViolationCategory":
        for category in cls:
            if category.value == code:
                return category
        raise ValueError(f"Unknown diagnostic code: {code}")


@dataclass(frozen=True)
class SourceLocation:
    """Where a declaration lives in source text."""
    path: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class PrimitiveArgument:
    """Attribute constructor argument holding a plain constant."""
    value: object


@dataclass(frozen=True)
class TypeReferenceArgument:
    """Attribute constructor argument referencing a type."""
    type: "ResolvedType"


@dataclass(frozen=True)
class UnresolvedArgument:
    """Attribute constructor argument the resolver could not bind."""
    source: str = ""


TypedConstant = Union[PrimitiveArgument, TypeReferenceArgument, UnresolvedArgument]


@dataclass(frozen=True)
class AttributeInstance:
    """
    One attribute applied to a type.

    attribute_type is None when the attribute's own type did not resolve;
    such an attribute never matches anything.
    """
    attribute_type: Optional["ResolvedType"]
    constructor_arguments: tuple[TypedConstant, ...] = ()


@dataclass(frozen=True)
class ResolvedType:
    """
    Read-only snapshot of a bound type.

    Hosts may hand the domain any object with the same attributes (see
    ResolvedTypeProtocol); this dataclass is the eager in-memory form.
    base_type is the next link of the base chain, most-derived first.
    interfaces is unordered: only membership matters.
    """
    name: str
    namespace: str
    kind: TypeKind = TypeKind.CLASS
    is_abstract: bool = False
    interfaces: tuple["ResolvedType", ...] = ()
    base_type: Optional["ResolvedType"] = None
    type_arguments: tuple[str, ...] = ()
    attributes: tuple[AttributeInstance, ...] = ()
    location: Optional[SourceLocation] = None

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}"


@dataclass(frozen=True)
class ContractDiagnostic:
    """One reported contract violation."""
    code: str
    category: ViolationCategory
    type_name: str
    message: str
    location: Optional[SourceLocation] = None
    severity: str = "error"
    fixable: bool = False
    qualified_name: str = ""

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for reporters."""
        return {
            "code": self.code,
            "category": self.category.name,
            "type_name": self.type_name,
            "message": self.message,
            "location": str(self.location) if self.location else "N/A",
            "severity": self.severity,
            "fixable": self.fixable,
        }


@dataclass(frozen=True)
class FixOutcome:
    """Result of attempting one automated fix."""
    diagnostic: ContractDiagnostic
    applied: bool
    reason: Optional[str] = None
    backup_path: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True)
class FixReport:
    """Everything a fix run did, plus what is still wrong afterwards."""
    outcomes: tuple[FixOutcome, ...] = ()
    remaining: tuple[ContractDiagnostic, ...] = ()

    @property
    def applied(self) -> tuple[FixOutcome, ...]:
        return tuple(o for o in self.outcomes if o.applied)

    @property
    def failed(self) -> tuple[FixOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.applied)

    def has_violations(self) -> bool:
        return bool(self.remaining)
