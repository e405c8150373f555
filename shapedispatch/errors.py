"""
Exception hierarchy for shapedispatch.

Construction errors are raised eagerly when a shape (or a shrink factor) is
invalid. Dispatch errors are raised at call time, since the set of
registrations is open and cannot be checked ahead of time.
"""

from typing import Any, Iterable, Sequence, Tuple


def describe_variants(variants: Sequence[type]) -> str:
    """Human readable form of a dispatch signature."""
    names = [getattr(cls, '__name__', repr(cls)) for cls in variants]
    if len(names) == 1:
        return names[0]
    return '(' + ', '.join(names) + ')'


class ShapeDispatchError(Exception):
    """Base class for all shapedispatch errors."""


class ConstructionError(ShapeDispatchError, ValueError):
    """An argument used to construct a shape (or a shrink factor) is invalid."""

    kind = 'invalid-argument'

    def __init__(self, argument: str, value: Any, reason: str = 'must be a positive finite real number'):
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(f"{argument} {reason}, got {value!r}")


class DispatchError(ShapeDispatchError):
    """Base class for failures of the dispatch mechanism."""


class NoApplicableImplementation(DispatchError):
    """No implementation is registered for the runtime variant(s) of a call."""

    def __init__(self, operation: str, variants: Tuple[type, ...]):
        self.operation = operation
        self.variants = tuple(variants)
        super().__init__(
            f"No implementation of '{operation}' is registered for {describe_variants(self.variants)}"
        )


class AmbiguousDispatch(DispatchError):
    """More than one registration is equally specific for a call."""

    def __init__(self, operation: str, variants: Tuple[type, ...], candidates: Iterable[Tuple[type, ...]]):
        self.operation = operation
        self.variants = tuple(variants)
        self.candidates = [tuple(sig) for sig in candidates]
        listed = ', '.join(describe_variants(sig) for sig in self.candidates)
        super().__init__(
            f"Ambiguous dispatch of '{operation}' for {describe_variants(self.variants)}: "
            f"candidates {listed}"
        )


class RegistrationError(DispatchError):
    """An implementation or operation could not be registered."""


class UnknownOperation(RegistrationError):
    """The registry has no operation with the requested name."""

    def __init__(self, operation: str, available: Iterable[str] = ()):
        self.operation = operation
        available = sorted(available)
        message = f"Operation '{operation}' is not defined"
        if available:
            message += f". Available operations: {', '.join(available)}"
        super().__init__(message)
