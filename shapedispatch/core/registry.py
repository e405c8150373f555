"""
OperationRegistry - named generic functions

Responsibilities:
  - Define operations (generic functions) under unique names
  - Register (operation, variant) implementations independently of the
    modules that define the operation or the variant
  - Invoke operations by name and provide introspection

Registration is meant to happen during program start-up. Writes are
serialized with a lock; lookups and calls do not lock.
"""

import logging
import threading
from typing import Callable, Dict, Optional, Sequence, Set, Union

from shapedispatch.core.dispatch import GenericFunction
from shapedispatch.errors import RegistrationError, UnknownOperation

logger = logging.getLogger(__name__)

OperationRef = Union[str, GenericFunction]


class OperationRegistry:
    """
    Registry of operations keyed by name.

    Example:
        registry = OperationRegistry()

        @registry.generic('shape')
        def area(shape):
            '''Area covered by shape.'''

        @registry.register('area', Square)
        def _(shape):
            return shape.width ** 2

        registry.invoke('area', Square(3))  # 9
    """

    def __init__(self):
        self._operations: Dict[str, GenericFunction] = {}
        self._lock = threading.Lock()

    def define(self, prototype: Callable, dispatch_on: Union[str, Sequence[str], None] = None,
               name: Optional[str] = None) -> GenericFunction:
        """
        Create and register a new generic function.

        :param prototype: Function providing name, docstring and signature
        :param dispatch_on: Argument name(s) to dispatch on
        :param name: Operation name, defaults to the prototype's name
        :raises RegistrationError: If an operation with that name exists
        """
        function = GenericFunction(prototype, dispatch_on=dispatch_on, name=name)
        with self._lock:
            if function.name in self._operations:
                raise RegistrationError(f"Operation '{function.name}' already defined")
            self._operations[function.name] = function
        logger.debug("Defined operation %s", function.name)
        return function

    def generic(self, *dispatch_on: str, name: Optional[str] = None) -> Callable[[Callable], GenericFunction]:
        """Decorator turning a prototype into a registered generic function."""
        def decorator(prototype):
            return self.define(prototype, dispatch_on=dispatch_on or None, name=name)
        return decorator

    def get(self, operation: OperationRef) -> GenericFunction:
        """
        Return the generic function for ``operation``.

        :raises UnknownOperation: If no operation with that name is defined
        """
        if isinstance(operation, GenericFunction):
            return operation
        try:
            return self._operations[operation]
        except KeyError:
            raise UnknownOperation(operation, self._operations) from None

    def register(self, operation: OperationRef, *variants: type,
                 override: bool = False) -> Callable[[Callable], Callable]:
        """Decorator registering an implementation of ``operation`` for ``variants``."""
        return self.get(operation).register(*variants, override=override)

    def invoke(self, operation: OperationRef, *args, **kwargs):
        """Call ``operation`` with the given arguments."""
        return self.get(operation)(*args, **kwargs)

    def __contains__(self, operation: str) -> bool:
        return operation in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    @property
    def available_operations(self) -> Set[str]:
        """Snapshot of the defined operation names."""
        return set(self._operations)


registry = OperationRegistry()

generic = registry.generic
register = registry.register
invoke = registry.invoke
get_operation = registry.get
