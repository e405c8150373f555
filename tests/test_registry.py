import pytest

from shapedispatch import (
    Circle, GenericFunction, NoApplicableImplementation, OperationRegistry, RegistrationError,
    Square, UnknownOperation,
)
import shapedispatch


@pytest.fixture
def registry():
    return OperationRegistry()


def test_define_and_invoke_by_name(registry):
    @registry.generic('shape')
    def perimeter(shape):
        """Length of the boundary."""

    assert isinstance(perimeter, GenericFunction)
    assert 'perimeter' in registry
    assert len(registry) == 1

    @registry.register('perimeter', Square)
    def _(shape):
        return 4 * shape.width

    assert registry.invoke('perimeter', Square(2)) == 8
    assert perimeter(Square(3)) == 12


def test_register_accepts_generic_function(registry):
    @registry.generic()
    def perimeter(shape):
        """Length of the boundary."""

    registry.register(perimeter, Square)(lambda shape: 4 * shape.width)
    assert registry.invoke(perimeter, Square(1)) == 4
    assert perimeter.dispatch_on == ('shape',)


def test_custom_operation_name(registry):
    @registry.generic(name='size')
    def measure(shape):
        pass

    assert registry.get('size') is measure
    assert measure.name == 'size'


def test_duplicate_operation_rejected(registry):
    def area(shape):
        pass

    registry.define(area)
    with pytest.raises(RegistrationError):
        registry.define(area)


def test_unknown_operation(registry):
    registry.define(lambda shape: None, name='known')
    with pytest.raises(UnknownOperation) as excinfo:
        registry.invoke('missing', Square(1))
    assert excinfo.value.operation == 'missing'
    assert 'known' in str(excinfo.value)

    with pytest.raises(UnknownOperation):
        registry.register('missing', Square)


def test_available_operations_is_snapshot(registry):
    registry.define(lambda shape: None, name='one')
    names = registry.available_operations
    names.add('two')
    assert registry.available_operations == {'one'}


def test_registries_are_independent(registry):
    other = OperationRegistry()
    registry.define(lambda shape: None, name='area')
    other.define(lambda shape: None, name='area')
    registry.register('area', Square)(lambda shape: shape.width ** 2)

    assert registry.invoke('area', Square(3)) == 9
    with pytest.raises(NoApplicableImplementation):
        other.invoke('area', Square(3))


def test_default_registry_holds_builtin_operations():
    names = shapedispatch.registry.available_operations
    assert {'point_in', 'shrink', 'bounds'} <= names
    assert shapedispatch.get_operation('shrink') is shapedispatch.shrink
    assert shapedispatch.invoke('shrink', Circle(4), 2) == Circle(2)
