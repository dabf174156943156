"""
Conversion of single QoS policy values to and from parameter values.

Each policy kind has one value domain:

    boolean   avoid_ros_namespace_conventions
    duration  deadline, lifespan, liveliness_lease_duration (int64 nanoseconds)
    count     depth (int64 parameter, unsigned 64-bit in the profile)
    string    durability, history, liveliness, reliability

Kinds missing from the field table raise UnsupportedPolicyKindError in both
directions.
"""

from collections import namedtuple
from enum import Enum

from .duration import Duration
from .exceptions import (
    UnknownPolicyValueError,
    UnsupportedPolicyKindError,
    ValueConversionError,
)
from .logging import logwarn_once
from .parameters import ParameterType, ParameterValue, as_parameter_value
from .policies import (
    DURABILITY_STRINGS,
    HISTORY_STRINGS,
    LIVELINESS_STRINGS,
    RELIABILITY_STRINGS,
    QoSPolicyKind,
)

_SIZE_MASK = 2 ** 64 - 1


class ValueDomain(Enum):
    BOOL = 'bool'
    DURATION = 'duration'
    COUNT = 'count'
    STRING = 'string'


_PolicyField = namedtuple('_PolicyField', ['attribute', 'domain', 'strings'])

_POLICY_FIELDS = {
    QoSPolicyKind.AVOID_ROS_NAMESPACE_CONVENTIONS:
        _PolicyField('avoid_ros_namespace_conventions', ValueDomain.BOOL, None),
    QoSPolicyKind.DEADLINE:
        _PolicyField('deadline', ValueDomain.DURATION, None),
    QoSPolicyKind.DURABILITY:
        _PolicyField('durability', ValueDomain.STRING, DURABILITY_STRINGS),
    QoSPolicyKind.HISTORY:
        _PolicyField('history', ValueDomain.STRING, HISTORY_STRINGS),
    QoSPolicyKind.DEPTH:
        _PolicyField('depth', ValueDomain.COUNT, None),
    QoSPolicyKind.LIFESPAN:
        _PolicyField('lifespan', ValueDomain.DURATION, None),
    QoSPolicyKind.LIVELINESS:
        _PolicyField('liveliness', ValueDomain.STRING, LIVELINESS_STRINGS),
    QoSPolicyKind.LIVELINESS_LEASE_DURATION:
        _PolicyField('liveliness_lease_duration', ValueDomain.DURATION, None),
    QoSPolicyKind.RELIABILITY:
        _PolicyField('reliability', ValueDomain.STRING, RELIABILITY_STRINGS),
}


def _policy_field(kind):
    try:
        return _POLICY_FIELDS[kind]
    except (KeyError, TypeError):
        raise UnsupportedPolicyKindError(kind) from None


def value_domain(kind):
    """
    Get the value domain of a policy kind.

    Raises:
        UnsupportedPolicyKindError: If the kind has no value conversion
    """
    return _policy_field(kind).domain


def _to_int64(count):
    # Reinterpret an unsigned 64-bit count as int64.
    count &= _SIZE_MASK
    return count - 2 ** 64 if count > 2 ** 63 - 1 else count


def _to_size(value):
    # Unchecked narrowing: negative values wrap modulo 2**64.
    if value < 0:
        logwarn_once(
            'Negative qos depth override %d wraps to %d; depth is not range checked',
            value,
            value & _SIZE_MASK,
        )
    return value & _SIZE_MASK


def _policy_to_parameter_string(kind, strings, policy_value):
    text = strings.to_str(policy_value)
    if text is None:
        raise ValueConversionError(kind, policy_value)
    return ParameterValue(text)


def _policy_from_parameter_string(kind, strings, value):
    text = value.get(ParameterType.STRING)
    policy_value = strings.from_str(text)
    if policy_value is strings.policy_type.UNKNOWN:
        raise UnknownPolicyValueError(kind, text)
    return policy_value


def get_default_qos_param_value(kind, qos):
    """
    Get the current value of one policy of a profile as a parameter value.

    Args:
        kind (QoSPolicyKind): Policy to read
        qos (QoSProfile): Profile to read from; not modified

    Returns:
        ParameterValue: BOOL, INTEGER (nanoseconds or depth) or STRING value

    Raises:
        UnsupportedPolicyKindError: If the kind has no value conversion
        ValueConversionError: If a string policy holds a value with no string form
    """
    field = _policy_field(kind)
    current = getattr(qos, field.attribute)

    if field.domain is ValueDomain.BOOL:
        return ParameterValue(bool(current))
    if field.domain is ValueDomain.DURATION:
        return ParameterValue(current.nanoseconds)
    if field.domain is ValueDomain.COUNT:
        return ParameterValue(_to_int64(int(current)))
    if field.domain is ValueDomain.STRING:
        return _policy_to_parameter_string(kind, field.strings, current)
    raise UnsupportedPolicyKindError(kind)


def apply_qos_override(kind, value, qos):
    """
    Write a parameter value into one policy of a profile.

    The profile is only modified when the conversion succeeds.

    Args:
        kind (QoSPolicyKind): Policy to write
        value: ParameterValue, or a plain bool/int/str
        qos (QoSProfile): Profile to modify in place

    Raises:
        UnsupportedPolicyKindError: If the kind has no value conversion
        ParameterTypeError: If the value has the wrong type for the policy
        UnknownPolicyValueError: If a string does not name a value of the policy
    """
    field = _policy_field(kind)
    value = as_parameter_value(value)

    if field.domain is ValueDomain.BOOL:
        new_value = value.get(ParameterType.BOOL)
    elif field.domain is ValueDomain.DURATION:
        new_value = Duration.from_nanoseconds(value.get(ParameterType.INTEGER))
    elif field.domain is ValueDomain.COUNT:
        new_value = _to_size(value.get(ParameterType.INTEGER))
    elif field.domain is ValueDomain.STRING:
        new_value = _policy_from_parameter_string(kind, field.strings, value)
    else:
        raise UnsupportedPolicyKindError(kind)
    setattr(qos, field.attribute, new_value)
