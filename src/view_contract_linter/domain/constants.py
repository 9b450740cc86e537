"""
Contract identities and visual telemetry constants.
"""

from typing import NamedTuple


class TypeIdentity(NamedTuple):
    """(namespace, name) pair identifying a type by its innermost namespace."""

    namespace: str
    name: str

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}"


VIEW_NAMESPACE: str = "views"
ENGINE_NAMESPACE: str = "engine"

# Generic marker interface; implementing it activates the contract.
MARKER_INTERFACE = TypeIdentity(VIEW_NAMESPACE, "IView")
# Runtime base class every concrete view must inherit.
REQUIRED_BASE = TypeIdentity(ENGINE_NAMESPACE, "MonoBehaviour")
# Dependency-declaration attribute (a class decorator in Python sources).
REQUIRED_ATTRIBUTE = TypeIdentity(ENGINE_NAMESPACE, "RequireComponent")
# Companion type the attribute has to reference.
COMPANION_TYPE = TypeIdentity(VIEW_NAMESPACE, "ViewGameObject")

SEVERITY_ERROR: str = "error"

# Qualified names astroid reports for typing constructs treated as interfaces.
PROTOCOL_QNAMES: frozenset[str] = frozenset(
    {
        "typing.Protocol",
        "typing_extensions.Protocol",
        "typing.Generic",
    }
)
ENUM_QNAMES: frozenset[str] = frozenset({"enum.Enum"})

# Last segment of a direct base that makes a class an interface or a value type.
INTERFACE_BASE_NAMES: frozenset[str] = frozenset({"Protocol", "Generic"})
VALUE_TYPE_BASE_NAME: str = "NamedTuple"

STRUCT_KEYWORD: str = "struct"
CLASS_KEYWORD: str = "class"

# VIEW CONTRACT: ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_VIEW_CONTRACT_ART: str = r"""
 __   ___               ___         _               _
 \ \ / (_)_____ __ __  / __|___ _ _| |_ _ _ __ _ __| |_
  \ V /| / -_) V  V / | (__/ _ \ ' \  _| '_/ _` / _|  _|
   \_/ |_\___|\_/\_/   \___\___/_||_\__|_| \__,_\__|\__|
"""
VIEW_CONTRACT_BANNER = _CYAN + _VIEW_CONTRACT_ART + _RESET
