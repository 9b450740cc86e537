"""Diagnostic registry and pure message-building from it. No I/O."""

from collections.abc import Mapping
from typing import Optional

from view_contract_linter.domain.constants import (
    COMPANION_TYPE,
    MARKER_INTERFACE,
    REQUIRED_ATTRIBUTE,
    REQUIRED_BASE,
)
from view_contract_linter.domain.registry_types import RuleRegistryEntry

VIEW_CONTRACT_REGISTRY: Mapping[str, RuleRegistryEntry] = {
    "MV001": {
        "code": "MV001",
        "msgid": "E9401",
        "symbol": "view-must-be-class",
        "display_name": "View must be a class",
        "message_template": "View '%s' must be declared as a class.",
        "short_description": (
            f"Types implementing {MARKER_INTERFACE.name} must be reference types (classes)."
        ),
        "fix_title": "Convert struct to class",
        "fixable": True,
    },
    "MV002": {
        "code": "MV002",
        "msgid": "E9402",
        "symbol": "view-must-inherit-monobehaviour",
        "display_name": f"View must inherit {REQUIRED_BASE.name}",
        "message_template": f"View '%s' must inherit from {REQUIRED_BASE.qualified_name}.",
        "short_description": (
            f"Concrete {MARKER_INTERFACE.name} classes must derive from {REQUIRED_BASE.qualified_name}."
        ),
        "fix_title": f"Inherit {REQUIRED_BASE.name}",
        "fixable": True,
    },
    "MV003": {
        "code": "MV003",
        "msgid": "E9403",
        "symbol": "view-unparameterized-interface",
        "display_name": f"Unparameterized {MARKER_INTERFACE.name}",
        "message_template": (
            f"View '%s' implements the raw {MARKER_INTERFACE.name}; "
            f"implement {MARKER_INTERFACE.name}[T] instead."
        ),
        "short_description": (
            f"{MARKER_INTERFACE.name} is generic; implementing it without type arguments is redundant."
        ),
        "fixable": False,
    },
    "MV004": {
        "code": "MV004",
        "msgid": "E9404",
        "symbol": "view-missing-require-component",
        "display_name": f"Missing {REQUIRED_ATTRIBUTE.name}({COMPANION_TYPE.name})",
        "message_template": (
            f"View '%s' must be decorated with "
            f"@{REQUIRED_ATTRIBUTE.name}({COMPANION_TYPE.name})."
        ),
        "short_description": (
            f"Concrete views must declare their {COMPANION_TYPE.name} dependency."
        ),
        "fixable": False,
    },
}


class RuleMsgBuilder:
    """
    Builds Pylint msgs dict from a registry mapping.

    No top-level functions: only __main__.py and checker.py may have them.
    """

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> Optional[RuleRegistryEntry]:
        """Return registry entry by diagnostic code, pylint msgid or symbol."""
        entry = registry.get(rule_code)
        if entry is not None:
            return entry
        for candidate in registry.values():
            if rule_code in (candidate.get("msgid"), candidate.get("symbol")):
                return candidate
        return None

    @staticmethod
    def format_message(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str, type_name: str
    ) -> str:
        """Render the message template for one offending type."""
        entry = RuleMsgBuilder.get_entry(registry, rule_code)
        if entry is None or not entry.get("message_template"):
            return f"{rule_code}: {type_name}"
        return entry["message_template"] % type_name

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict for the given diagnostic codes.

        Returns { msgid: (message_template, symbol, description) } for checker.msgs.
        """
        result: dict[str, tuple[str, str, str]] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code)
            if entry and entry.get("message_template") and entry.get("msgid"):
                msg = entry["message_template"]
                symbol = entry.get("symbol") or code
                desc = (
                    entry.get("short_description")
                    or entry.get("display_name")
                    or code
                )
                result[entry["msgid"]] = (str(msg), str(symbol), str(desc))
        return result
