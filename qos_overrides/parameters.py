"""
Parameter values, descriptors and the in-memory parameter store that QoS
parameters are declared on.
"""

import threading
from enum import Enum

from .duration import INT64_MAX, INT64_MIN
from .exceptions import (
    InvalidParameterNameError,
    InvalidParameterTypeError,
    ParameterAlreadyDeclaredError,
    ParameterImmutableError,
    ParameterNotDeclaredError,
    ParameterTypeError,
    ParameterValueError,
)
from .logging import logdebug


class ParameterType(Enum):
    BOOL = 'bool'
    INTEGER = 'integer'
    DOUBLE = 'double'
    STRING = 'string'
    BOOL_ARRAY = 'bool_array'
    INTEGER_ARRAY = 'integer_array'
    DOUBLE_ARRAY = 'double_array'
    STRING_ARRAY = 'string_array'

    def __str__(self):
        return self.value


def _check_int64(value):
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParameterValueError(f'integer parameter value {value} does not fit in int64')
    return value


def _scalar_type(value):
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ParameterType.BOOL
    if isinstance(value, int):
        return ParameterType.INTEGER
    if isinstance(value, float):
        return ParameterType.DOUBLE
    if isinstance(value, str):
        return ParameterType.STRING
    return None


_ARRAY_TYPES = {
    ParameterType.BOOL: ParameterType.BOOL_ARRAY,
    ParameterType.INTEGER: ParameterType.INTEGER_ARRAY,
    ParameterType.DOUBLE: ParameterType.DOUBLE_ARRAY,
    ParameterType.STRING: ParameterType.STRING_ARRAY,
}


def _infer_type(value):
    scalar = _scalar_type(value)
    if scalar is not None:
        if scalar is ParameterType.INTEGER:
            _check_int64(value)
        return scalar

    if isinstance(value, (list, tuple)):
        if not value:
            raise ParameterValueError('cannot infer the type of an empty array')
        item_types = {_scalar_type(item) for item in value}
        if len(item_types) != 1 or None in item_types:
            raise ParameterValueError(f'array items must share one scalar type: {value!r}')
        item_type = item_types.pop()
        if item_type is ParameterType.INTEGER:
            for item in value:
                _check_int64(item)
        return _ARRAY_TYPES[item_type]

    raise ParameterValueError(f'unsupported parameter value type: {type(value).__name__}')


class ParameterValue:
    """
    Tagged parameter value.

    The type is inferred from the Python value: bool -> BOOL, int -> INTEGER
    (must fit in int64), float -> DOUBLE, str -> STRING, and homogeneous
    lists of those -> the matching array type.
    """

    __slots__ = ('_type', '_value')

    def __init__(self, value):
        self._type = _infer_type(value)
        if isinstance(value, (list, tuple)):
            value = tuple(value)
        self._value = value

    @property
    def type(self):
        return self._type

    @property
    def value(self):
        return self._value

    def get(self, expected_type):
        """
        Get the value, checking that it has the expected type.

        Args:
            expected_type (ParameterType): Type the caller requires

        Returns:
            The held Python value

        Raises:
            ParameterTypeError: If the value has another type
        """
        if self._type is not expected_type:
            raise ParameterTypeError(expected_type, self._type)
        return self._value

    def __eq__(self, other):
        if not isinstance(other, ParameterValue):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    def __hash__(self):
        return hash((self._type, self._value))

    def __repr__(self):
        return f'ParameterValue({self._value!r})'


def as_parameter_value(value):
    """Wrap a plain Python value, passing ParameterValues through."""
    if isinstance(value, ParameterValue):
        return value
    return ParameterValue(value)


class ParameterDescriptor:
    def __init__(self, name='', description='', read_only=False):
        self.name = name
        self.description = description
        self.read_only = read_only

    def __eq__(self, other):
        if not isinstance(other, ParameterDescriptor):
            return NotImplemented
        return (
            self.name == other.name
            and self.description == other.description
            and self.read_only == other.read_only
        )

    def __repr__(self):
        return (
            f'ParameterDescriptor(name={self.name!r}, '
            f'description={self.description!r}, read_only={self.read_only!r})'
        )


class ParameterStore:
    """
    Thread-safe in-memory parameter store.

    Operator overrides are supplied up front (directly or from a parameter
    file) and take effect when a parameter with the same name is declared.
    """

    def __init__(self, overrides=None):
        """
        Create a parameter store.

        Args:
            overrides (dict): Parameter name -> ParameterValue or plain value
        """
        self._lock = threading.Lock()
        self._overrides = {
            name: as_parameter_value(value)
            for name, value in (overrides or {}).items()
        }
        self._values = {}
        self._descriptors = {}

    @classmethod
    def from_params_file(cls, path, node_name):
        """
        Create a store whose overrides come from a ROS parameter file.

        Args:
            path (str): Path of the YAML parameter file
            node_name (str): Fully qualified name of the node, e.g. '/ns/talker'

        Returns:
            ParameterStore: Store seeded with the matching overrides
        """
        from .params_file import load_parameter_overrides

        return cls(load_parameter_overrides(path, node_name))

    @property
    def overrides(self):
        return dict(self._overrides)

    def declare_parameter(self, name, default_value, descriptor=None):
        """
        Declare a parameter and get its effective value.

        Args:
            name (str): Parameter name
            default_value: ParameterValue or plain value used when no override exists
            descriptor (ParameterDescriptor): Description and read-only flag

        Returns:
            ParameterValue: The override for `name` if one was supplied, else the default

        Raises:
            InvalidParameterNameError: If the name is empty
            ParameterAlreadyDeclaredError: If the name is already declared
            InvalidParameterTypeError: If the override's type differs from the default's
        """
        if not name:
            raise InvalidParameterNameError('parameter name must not be empty')
        default_value = as_parameter_value(default_value)
        if descriptor is None:
            descriptor = ParameterDescriptor(name=name)
        elif not descriptor.name:
            descriptor = ParameterDescriptor(name, descriptor.description, descriptor.read_only)

        with self._lock:
            if name in self._values:
                raise ParameterAlreadyDeclaredError(name)

            value = default_value
            override = self._overrides.get(name)
            if override is not None:
                if override.type is not default_value.type:
                    raise InvalidParameterTypeError(name, default_value.type, override.type)
                logdebug("Using override for parameter '%s': %r", name, override.value)
                value = override

            self._values[name] = value
            self._descriptors[name] = descriptor
        return value

    def has_parameter(self, name):
        with self._lock:
            return name in self._values

    def get_parameter(self, name):
        """
        Get the value of a declared parameter.

        Raises:
            ParameterNotDeclaredError: If the parameter is not declared
        """
        with self._lock:
            try:
                return self._values[name]
            except KeyError:
                raise ParameterNotDeclaredError(name) from None

    def set_parameter(self, name, value):
        """
        Change the value of a declared, writable parameter.

        The new value must keep the declared type.

        Raises:
            ParameterNotDeclaredError: If the parameter is not declared
            ParameterImmutableError: If the parameter is read-only
            InvalidParameterTypeError: If the value has another type
        """
        value = as_parameter_value(value)
        with self._lock:
            if name not in self._values:
                raise ParameterNotDeclaredError(name)
            if self._descriptors[name].read_only:
                raise ParameterImmutableError(name)
            current = self._values[name]
            if current.type is not value.type:
                raise InvalidParameterTypeError(name, current.type, value.type)
            self._values[name] = value

    def describe_parameter(self, name):
        with self._lock:
            try:
                return self._descriptors[name]
            except KeyError:
                raise ParameterNotDeclaredError(name) from None

    def list_parameters(self, prefix=''):
        """
        List declared parameter names in declaration order.

        Args:
            prefix (str): Only list names equal to or nested under this prefix
        """
        with self._lock:
            names = list(self._values)
        if not prefix:
            return names
        return [n for n in names if n == prefix or n.startswith(prefix + '.')]

    def get_parameters_by_prefix(self, prefix):
        """
        Get declared parameters nested under a dotted prefix.

        Args:
            prefix (str): Prefix without the trailing dot, e.g. 'qos_overrides./chatter'

        Returns:
            dict: Name relative to the prefix -> ParameterValue
        """
        dotted = prefix + '.' if prefix else ''
        with self._lock:
            return {
                name[len(dotted):]: value
                for name, value in self._values.items()
                if name.startswith(dotted)
            }
