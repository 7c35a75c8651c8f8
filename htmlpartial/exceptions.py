"""Partial resolution exceptions."""

from typing import List, Sequence
from dataclasses import dataclass


class PartialError(Exception):
    """Base class for errors raised or reported while resolving partials."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingSourceAttributeError(PartialError):
    """A partial tag has no 'src' attribute."""

    def __init__(self, tag: str = ""):
        self.tag = tag
        super().__init__("Some partial does not have 'src' attribute")


class SourceNotFoundError(PartialError):
    """The file referenced by a partial's 'src' does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File {path} does not exist.")


class CycleDetectedError(PartialError):
    """A partial includes itself, directly or through other partials."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__(f"Circular partial include: {' -> '.join(self.chain)}")


class UnsupportedInputKindError(PartialError):
    """Raised for streamed input; only fully buffered documents are resolved."""

    def __init__(self):
        super().__init__("Streams are not supported")


@dataclass
class ValidationError:
    """Single configuration validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class ConfigValidationError(Exception):
    """Raised when configuration validation fails.

    Carries every collected error so the CLI can print them all and map
    to the validation exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
