"""
qos_overrides: QoS policy overrides through read-only parameters

Each overridable QoS policy of a publisher or subscription is declared as a
read-only parameter named

    qos_overrides.<topic>.<publisher|subscription>[_<id>].<policy>

seeded with the profile's current value. Whatever value the parameter store
resolves (the default, or an operator override from a parameter file) is
written back into the profile before the endpoint is created.
"""

# Version information
__version__ = '1.0.0'

# Policies and profiles
from .policies import (
    QoSPolicyKind,
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    ReliabilityPolicy,
    PolicyStringTable,
    DURABILITY_STRINGS,
    HISTORY_STRINGS,
    LIVELINESS_STRINGS,
    RELIABILITY_STRINGS,
    qos_policy_kind_to_str,
    qos_policy_kind_from_str,
)
from .duration import Duration
from .profile import QoSProfile, create_qos_profile, get_preset_profile

# Parameters
from .parameters import (
    ParameterType,
    ParameterValue,
    ParameterDescriptor,
    ParameterStore,
)
from .params_file import load_parameter_overrides

# Overrides
from .options import QosOverridingOptions, QosCallbackResult
from .catalog import (
    PublisherQosParametersTraits,
    SubscriptionQosParametersTraits,
    allowed_policies,
)
from .naming import build_name, build_description
from .codec import get_default_qos_param_value, apply_qos_override
from .engine import (
    declare_qos_parameters,
    declare_publisher_qos_parameters,
    declare_subscription_qos_parameters,
)
from .entities import resolve_publisher_qos, resolve_subscription_qos

# Exceptions
from .exceptions import (
    QoSOverridesException,
    UnsupportedPolicyKindError,
    ValueConversionError,
    UnknownPolicyValueError,
    InvalidProfileError,
    ParameterException,
    ParameterTypeError,
    ParameterValueError,
    InvalidParameterNameError,
    ParameterAlreadyDeclaredError,
    ParameterNotDeclaredError,
    ParameterImmutableError,
    InvalidParameterTypeError,
    ParameterFileError,
)


__all__ = [
    # Version
    '__version__',

    # Policies and profiles
    'QoSPolicyKind',
    'DurabilityPolicy',
    'HistoryPolicy',
    'LivelinessPolicy',
    'ReliabilityPolicy',
    'PolicyStringTable',
    'DURABILITY_STRINGS',
    'HISTORY_STRINGS',
    'LIVELINESS_STRINGS',
    'RELIABILITY_STRINGS',
    'qos_policy_kind_to_str',
    'qos_policy_kind_from_str',
    'Duration',
    'QoSProfile',
    'create_qos_profile',
    'get_preset_profile',

    # Parameters
    'ParameterType',
    'ParameterValue',
    'ParameterDescriptor',
    'ParameterStore',
    'load_parameter_overrides',

    # Overrides
    'QosOverridingOptions',
    'QosCallbackResult',
    'PublisherQosParametersTraits',
    'SubscriptionQosParametersTraits',
    'allowed_policies',
    'build_name',
    'build_description',
    'get_default_qos_param_value',
    'apply_qos_override',
    'declare_qos_parameters',
    'declare_publisher_qos_parameters',
    'declare_subscription_qos_parameters',
    'resolve_publisher_qos',
    'resolve_subscription_qos',

    # Exceptions
    'QoSOverridesException',
    'UnsupportedPolicyKindError',
    'ValueConversionError',
    'UnknownPolicyValueError',
    'InvalidProfileError',
    'ParameterException',
    'ParameterTypeError',
    'ParameterValueError',
    'InvalidParameterNameError',
    'ParameterAlreadyDeclaredError',
    'ParameterNotDeclaredError',
    'ParameterImmutableError',
    'InvalidParameterTypeError',
    'ParameterFileError',
]
