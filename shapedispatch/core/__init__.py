"""
Dispatch machinery: generic functions and the operation registry.
"""

from .dispatch import GenericFunction, EffectiveMethod, implies, most_specific_signatures, ordered_signatures
from .registry import OperationRegistry, registry, generic, register, invoke, get_operation

__all__ = [
    'GenericFunction', 'EffectiveMethod', 'implies', 'most_specific_signatures', 'ordered_signatures',
    'OperationRegistry', 'registry', 'generic', 'register', 'invoke', 'get_operation',
]
