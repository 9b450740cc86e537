from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    code: str
    msgid: str
    symbol: str
    display_name: str
    message_template: str
    short_description: str
    fix_title: str
    fixable: bool
