"""
Generic functions with open multiple dispatch.

A :class:`GenericFunction` keeps a table from signatures (one class per
dispatched argument) to implementations. Each call looks at the runtime
classes of the dispatched arguments and selects the most specific
registration:

- an exact signature match wins outright;
- otherwise every registration whose classes are superclasses of the runtime
  classes is applicable, and the applicable set is reduced to the signatures
  not implied by any other;
- no applicable registration raises NoApplicableImplementation, more than
  one most-specific registration raises AmbiguousDispatch.

Because resolution works on the whole table, the order in which
registrations were added never changes the result.

Besides primary implementations, ``before`` and ``after`` methods may be
attached to any signature. Every applicable one runs around the primary
implementation, ``before`` methods most specific first and ``after``
methods least specific first.

Example:
    >>> from shapedispatch.geom.shape import Square
    >>> @GenericFunction
    ... def describe(shape):
    ...     '''Return a short description of shape.'''
    >>> @describe.register(Square)
    ... def _(shape):
    ...     return f"square {shape.width}"
    >>> describe(Square(2))
    'square 2'
"""

import functools
import inspect
import logging
import threading
import warnings
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from shapedispatch.errors import (
    AmbiguousDispatch, NoApplicableImplementation, RegistrationError, describe_variants,
)

logger = logging.getLogger(__name__)

Signature = Tuple[type, ...]
Case = Tuple[Signature, Callable]


def implies(signature: Signature, other: Signature) -> bool:
    """True if ``signature`` is at least as specific as ``other``."""
    return all(issubclass(a, b) for a, b in zip(signature, other))


def most_specific_signatures(cases: Sequence[Case]) -> List[Case]:
    """
    List the most specific ``(signature, method)`` pairs from ``cases``.

    The result holds every case whose signature is not strictly implied by
    another case's signature. Equivalent signatures are all kept.
    """
    if len(cases) == 1:
        return list(cases)

    best, rest = list(cases[:1]), cases[1:]

    for new_sig, new_meth in rest:
        for old_sig, old_meth in best[:]:
            new_implies_old = implies(new_sig, old_sig)
            old_implies_new = implies(old_sig, new_sig)

            if new_implies_old:
                if not old_implies_new:
                    best.remove((old_sig, old_meth))
            elif old_implies_new:
                break
        else:
            best.append((new_sig, new_meth))

    return best


def ordered_signatures(cases: Iterable[Case]) -> Iterator[List[Case]]:
    """Yield groups of cases in decreasing order of specificity."""
    rest = list(cases)
    while rest:
        best = most_specific_signatures(rest)
        for case in best:
            rest.remove(case)
        yield best


def _raiser(exc_type, *exc_args) -> Callable:
    """Return a callable that raises a fresh exc_type(*exc_args) when called."""
    def raise_error(*args, **kwargs):
        raise exc_type(*exc_args)
    return raise_error


class EffectiveMethod:
    """The combination of methods selected for one tuple of runtime classes."""

    __slots__ = ('befores', 'primary', 'afters')

    def __init__(self, befores: Sequence[Callable], primary: Callable, afters: Sequence[Callable]):
        self.befores = tuple(befores)
        self.primary = primary
        self.afters = tuple(afters)

    def __call__(self, *args, **kwargs):
        for method in self.befores:
            method(*args, **kwargs)
        result = self.primary(*args, **kwargs)
        for method in self.afters:
            method(*args, **kwargs)
        return result


class GenericFunction:
    """
    A function whose implementation is chosen per call from the runtime
    classes of one or more of its arguments.

    :param prototype: Function defining the name, docstring and call
        signature. Its body is never called.
    :param dispatch_on: Name, or sequence of names, of the arguments to
        dispatch on. Defaults to the first parameter.
    :param name: Operation name, defaults to ``prototype.__name__``
    """

    def __init__(self, prototype: Callable, dispatch_on: Union[str, Sequence[str], None] = None,
                 name: Optional[str] = None):
        self.prototype = prototype
        self.name = name or prototype.__name__
        self.signature = inspect.signature(prototype)

        parameters = list(self.signature.parameters)
        if dispatch_on is None:
            dispatch_on = parameters[:1]
        elif isinstance(dispatch_on, str):
            dispatch_on = (dispatch_on,)
        dispatch_on = tuple(dispatch_on)

        if not dispatch_on:
            raise RegistrationError(f"Generic function '{self.name}' needs at least one argument to dispatch on")
        unknown = [arg for arg in dispatch_on if arg not in parameters]
        if unknown:
            raise RegistrationError(
                f"Generic function '{self.name}' has no parameter(s) {', '.join(unknown)}"
            )
        self.dispatch_on = dispatch_on

        self._primary: Dict[Signature, Callable] = {}
        self._before: List[Case] = []
        self._after: List[Case] = []
        self._cache: Dict[Signature, EffectiveMethod] = {}
        self._lock = threading.Lock()

        functools.update_wrapper(self, prototype)

    def __repr__(self):
        return f"<GenericFunction {self.name} dispatching on {', '.join(self.dispatch_on)}>"

    # Registration

    def _normalize(self, classes: Sequence[type]) -> Signature:
        signature = tuple(classes)
        if len(signature) != len(self.dispatch_on):
            raise RegistrationError(
                f"'{self.name}' dispatches on {len(self.dispatch_on)} argument(s), "
                f"got signature of length {len(signature)}"
            )
        for cls in signature:
            if not isinstance(cls, type):
                raise RegistrationError(f"'{self.name}' signature entries must be classes, got {cls!r}")
        return signature

    def add(self, classes: Sequence[type], method: Callable, override: bool = False) -> None:
        """
        Register ``method`` as the primary implementation for ``classes``.

        :param classes: One class per dispatched argument
        :param method: Implementation, called with the generic function's arguments
        :param override: Replace an existing registration instead of failing
        :raises RegistrationError: If the signature is invalid or already registered
        """
        signature = self._normalize(classes)
        with self._lock:
            if signature in self._primary:
                if not override:
                    raise RegistrationError(
                        f"'{self.name}' already has an implementation for {describe_variants(signature)}"
                    )
                warnings.warn(
                    f"Replacing implementation of '{self.name}' for {describe_variants(signature)}",
                    UserWarning, stacklevel=3,
                )
            self._primary[signature] = method
            self._cache.clear()
        logger.debug("Registered %s for %s", self.name, describe_variants(signature))

    def register(self, *classes: type, override: bool = False) -> Callable[[Callable], Callable]:
        """Decorator form of :meth:`add`. Returns the decorated function unchanged."""
        def decorator(method):
            self.add(classes, method, override=override)
            return method
        return decorator

    def _add_auxiliary(self, table: List[Case], qualifier: str, classes: Sequence[type], method: Callable) -> None:
        signature = self._normalize(classes)
        with self._lock:
            table.append((signature, method))
            self._cache.clear()
        logger.debug("Registered %s method of %s for %s", qualifier, self.name, describe_variants(signature))

    def before(self, *classes: type) -> Callable[[Callable], Callable]:
        """Decorator registering a method to run before the primary implementation."""
        def decorator(method):
            self._add_auxiliary(self._before, 'before', classes, method)
            return method
        return decorator

    def after(self, *classes: type) -> Callable[[Callable], Callable]:
        """Decorator registering a method to run after the primary implementation."""
        def decorator(method):
            self._add_auxiliary(self._after, 'after', classes, method)
            return method
        return decorator

    # Resolution

    def _find_primary(self, classes: Signature) -> Tuple[Optional[Callable], List[Signature]]:
        """Return ``(method, [])``, or ``(None, conflicting signatures)`` on failure."""
        method = self._primary.get(classes)
        if method is not None:
            return method, []

        cases = [(sig, meth) for sig, meth in self._primary.items() if implies(classes, sig)]
        if not cases:
            return None, []

        best = most_specific_signatures(cases)
        if len(best) > 1:
            return None, [sig for sig, _ in best]
        return best[0][1], []

    def _select_primary(self, classes: Signature) -> Callable:
        method, conflicts = self._find_primary(classes)
        if method is not None:
            return method
        if conflicts:
            return _raiser(AmbiguousDispatch, self.name, classes, conflicts)
        return _raiser(NoApplicableImplementation, self.name, classes)

    def _applicable(self, table: List[Case], classes: Signature) -> List[Callable]:
        cases = [case for case in table if implies(classes, case[0])]
        return [method for group in ordered_signatures(cases) for _, method in group]

    def _effective_method(self, classes: Signature) -> EffectiveMethod:
        method = self._cache.get(classes)
        if method is None:
            method = EffectiveMethod(
                self._applicable(self._before, classes),
                self._select_primary(classes),
                list(reversed(self._applicable(self._after, classes))),
            )
            self._cache[classes] = method
        return method

    def dispatch_classes(self, *args, **kwargs) -> Signature:
        """Return the runtime classes of the dispatched arguments of a call."""
        try:
            bound = self.signature.bind(*args, **kwargs)
        except TypeError as e:
            raise TypeError(f"{self.name}(): {e}") from None
        bound.apply_defaults()
        return tuple(type(bound.arguments[arg]) for arg in self.dispatch_on)

    def __call__(self, *args, **kwargs):
        classes = self.dispatch_classes(*args, **kwargs)
        return self._effective_method(classes)(*args, **kwargs)

    # Introspection

    def resolve(self, *classes: type) -> Callable:
        """
        Return the primary implementation selected for ``classes``.

        :raises NoApplicableImplementation: If nothing is applicable
        :raises AmbiguousDispatch: If several registrations are equally specific
        """
        signature = self._normalize(classes)
        method, conflicts = self._find_primary(signature)
        if method is not None:
            return method
        if conflicts:
            raise AmbiguousDispatch(self.name, signature, conflicts)
        raise NoApplicableImplementation(self.name, signature)

    def is_applicable(self, *classes: type) -> bool:
        """True if a call with these runtime classes would find an implementation."""
        try:
            self.resolve(*classes)
        except (NoApplicableImplementation, AmbiguousDispatch):
            return False
        return True

    def implementations(self) -> Dict[Signature, Callable]:
        """Snapshot of the primary registrations."""
        return dict(self._primary)

    def cache_clear(self) -> None:
        with self._lock:
            self._cache.clear()
        logger.debug("Cleared dispatch cache of %s", self.name)
