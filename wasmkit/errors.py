"""Exception hierarchy shared by the library and the command line."""

from __future__ import annotations


class SubwasmLibError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, message: str = "Unknown error") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class PalletNotFoundError(SubwasmLibError):
    """The requested pallet does not exist in the runtime."""

    def __init__(self, pallet: str) -> None:
        super().__init__(f"The following pallet was not found: `{pallet}`")
        self.pallet = pallet


class NotFoundError(SubwasmLibError):
    """A named item could not be found."""

    def __init__(self, item: str) -> None:
        super().__init__(f"The following item was not found: `{item}`")
        self.item = item


class EndpointNotFoundError(SubwasmLibError):
    """No endpoint is known for the given chain name or alias."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Endpoint not found for `{name}`")
        self.name = name


class ParsingError(SubwasmLibError):
    """Some input could not be parsed."""

    def __init__(self, name: str, hint: str) -> None:
        super().__init__(f"Error parsing `{name}`.{hint}")
        self.name = name
        self.hint = hint


class UnknownSourceError(SubwasmLibError):
    """The input cannot be resolved to any known kind of source."""

    def __init__(self, source: str) -> None:
        super().__init__(f"Cannot resolve `{source}` to a known Source")
        self.source = source


class UnsupportedFilterError(SubwasmLibError):
    """A filter was requested for an output format that cannot filter."""

    def __init__(self) -> None:
        super().__init__("Cannot filter with this format")


class SourceParseError(SubwasmLibError):
    """A command line argument could not be parsed as a source."""

    def __init__(self, text: str) -> None:
        super().__init__(f"SourceParseError {text}")
        self.text = text