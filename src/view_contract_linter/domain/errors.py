"""Errors raised when a caller asks for something the contract cannot deliver."""


class ViewContractError(Exception):
    """Base class for view contract errors."""


class FixNotAvailableError(ViewContractError):
    """No patch recipe or fix action exists for the requested diagnostic."""

    def __init__(self, code: str) -> None:
        super().__init__(f"No automated fix is available for {code}.")
        self.code = code


class DeclarationNotFoundError(ViewContractError):
    """The document holds no declaration of the expected kind at the location."""

    def __init__(self, location: str, expected_keyword: str) -> None:
        super().__init__(
            f"No '{expected_keyword}' declaration found at {location}.")
        self.location = location
        self.expected_keyword = expected_keyword


class InvalidDeclarationError(ViewContractError):
    """A patch was requested for a declaration of the wrong shape."""


class SourceUnavailableError(ViewContractError):
    """A document could not be read or parsed."""
