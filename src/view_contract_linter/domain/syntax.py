"""
Immutable syntax model for type declarations.

Hosts build these nodes from their own trees and keep the host node in
``origin`` so a replacement can be written back without re-parsing.
Nothing here is ever mutated; patches return new nodes via dataclasses.replace.
"""

from dataclasses import dataclass, field
from typing import Optional

from view_contract_linter.domain.constants import CLASS_KEYWORD, STRUCT_KEYWORD


@dataclass(frozen=True)
class Token:
    """A token with the whitespace/comments attached on either side."""
    text: str
    leading_trivia: str = ""
    trailing_trivia: str = ""

    def with_text(self, text: str) -> "Token":
        return Token(text, self.leading_trivia, self.trailing_trivia)


@dataclass(frozen=True)
class BaseTypeRef:
    """One entry of a declaration's base list."""
    name: str
    type_arguments: tuple[str, ...] = ()
    origin: object = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        if self.type_arguments:
            return f"{self.name}[{', '.join(self.type_arguments)}]"
        return self.name


@dataclass(frozen=True)
class BaseList:
    """
    Ordered base types. A present-but-empty list is a legal input only;
    every edit normalizes an empty list to an absent one.
    """
    types: tuple[BaseTypeRef, ...] = ()
    colon: Token = Token(":", trailing_trivia=" ")

    def __len__(self) -> int:
        return len(self.types)


@dataclass(frozen=True)
class DeclarationNode:
    """A struct or class declaration."""
    keyword: Token
    identifier: Token
    attributes: tuple[object, ...] = ()
    modifiers: tuple[Token, ...] = ()
    type_parameters: tuple[str, ...] = ()
    base_list: Optional[BaseList] = None
    constraint_clauses: tuple[object, ...] = ()
    members: tuple[object, ...] = ()
    open_brace: Optional[Token] = None
    close_brace: Optional[Token] = None
    semicolon: Optional[Token] = None
    origin: object = field(default=None, compare=False, repr=False)

    @property
    def is_value_type(self) -> bool:
        return self.keyword.text == STRUCT_KEYWORD

    @property
    def is_reference_type(self) -> bool:
        return self.keyword.text == CLASS_KEYWORD

    @property
    def base_types(self) -> tuple[BaseTypeRef, ...]:
        if self.base_list is None:
            return ()
        return self.base_list.types
