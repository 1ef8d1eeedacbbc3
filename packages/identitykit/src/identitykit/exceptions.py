# identitykit/exceptions.py
"""Identity exceptions.

Every resolution error describes caller or configuration misconfiguration, so
all of them carry the :class:`NonRetryableError` marker. Structured values are
kept as attributes so callers can render their own diagnostics.
"""

from typing import Any


class IdentityKitError(Exception):
    """Base for all identitykit exceptions."""


# ----------------------------------------------------------------------------
# Markers
# ----------------------------------------------------------------------------
class NonRetryableError: ...


# ----------------------------------------------------------------------------
# Descriptor errors
# ----------------------------------------------------------------------------
class IdentityDescriptorError(IdentityKitError, ValueError):
    """Raised when an identity descriptor violates its invariants."""


# ----------------------------------------------------------------------------
# State errors
# ----------------------------------------------------------------------------
class StateWriteError(IdentityKitError, NonRetryableError):
    """Raised by a state store when an attribute cannot be written."""

    def __init__(self, attribute: str, reason: str = "attribute is not declared") -> None:
        self.attribute = attribute
        self.reason = reason
        super().__init__(f"cannot write attribute {attribute!r}: {reason}")


class IdentityWriteError(IdentityKitError, NonRetryableError):
    """Raised when write-back fails to persist an identity attribute."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"writing identity attribute {attribute!r}")

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is None:
            return super().__str__()
        return f"{super().__str__()}: {cause}"


# ----------------------------------------------------------------------------
# Resolution errors
# ----------------------------------------------------------------------------
class IdentityResolutionError(IdentityKitError, NonRetryableError):
    """Raised when import resolution fails."""


class MissingRequiredIdentityAttributeError(IdentityResolutionError):
    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"identity attribute {attribute!r} is required")


class TypeMismatchError(IdentityResolutionError, TypeError):
    def __init__(self, attribute: str, value: Any) -> None:
        self.attribute = attribute
        self.value = value
        super().__init__(
            f"identity attribute {attribute!r}: expected string, got {type(value).__name__}"
        )


class _MismatchError(IdentityResolutionError):
    """Shared shape for expected/actual validation failures."""

    subject: str = "value"

    def __init__(self, expected: str, actual: str, *, attribute: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.attribute = attribute
        super().__init__(self._render())

    def _render(self) -> str:
        prefix = "Unable to import"
        if self.attribute:
            prefix = f"{prefix}\n\nidentity attribute {self.attribute!r}:"
        else:
            prefix = f"{prefix}:"
        return f"{prefix} Provider configured with {self.subject} {self.expected!r}, got {self.actual!r}"


class AccountMismatchError(_MismatchError):
    subject = "Account ID"


class RegionMismatchError(_MismatchError):
    subject = "Region"


class PartitionMismatchError(_MismatchError):
    subject = "Partition"


class InvalidARNError(IdentityResolutionError):
    def __init__(self, value: Any, reason: str = "not a valid ARN") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"could not parse import ID {value!r} as ARN: {reason}")


class ImportCancelledError(IdentityResolutionError):
    """Raised when the caller cancels resolution before it completes."""


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(IdentityKitError): ...


class RegistryDuplicateError(RegistryError): ...


class RegistryCollisionError(RegistryError): ...


class RegistryLookupError(RegistryError, LookupError): ...


class RegistryFrozenError(RuntimeError, RegistryError): ...
