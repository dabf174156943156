"""
Declaration of QoS override parameters for publishers and subscriptions.
"""

from .catalog import PublisherQosParametersTraits, SubscriptionQosParametersTraits
from .codec import apply_qos_override, get_default_qos_param_value
from .exceptions import InvalidProfileError
from .logging import logdebug
from .naming import build_description, build_name
from .parameters import ParameterDescriptor


def declare_qos_parameters(options, parameters_interface, topic_name, qos, traits):
    """
    Declare the QoS override parameters of one entity and apply their values.

    For every policy in `traits.allowed_policies` that `options` requests,
    a read-only parameter is declared with the profile's current value as
    default, and the value the parameter store returns is written back into
    `qos`. Requested policies the entity type does not allow are skipped.

    The first failure aborts the pass. Policies applied before the failure
    stay applied, so callers must discard `qos` when this raises.

    Args:
        options (QosOverridingOptions): Requested policies, entity id and
            optional validation callback
        parameters_interface: Object with a
            `declare_parameter(name, default_value, descriptor)` method
            returning the effective value
        topic_name (str): Fully qualified topic name of the entity
        qos (QoSProfile): Profile to read defaults from and modify in place
        traits: PublisherQosParametersTraits or SubscriptionQosParametersTraits

    Raises:
        UnsupportedPolicyKindError: If a policy has no value conversion
        ValueConversionError: If the profile holds a value with no string form
        UnknownPolicyValueError: If an override names no value of its policy
        ParameterTypeError: If an override has the wrong type
        InvalidProfileError: If the validation callback rejects the final profile
        ParameterException: Errors raised by the parameter store propagate unchanged
    """
    entity_type = traits.entity_type
    for policy in traits.allowed_policies:
        if policy not in options.policy_kinds:
            continue
        default_value = get_default_qos_param_value(policy, qos)
        name = build_name(topic_name, entity_type, options.entity_id, policy)
        descriptor = ParameterDescriptor(
            name=name,
            description=build_description(topic_name, entity_type, options.entity_id, policy),
            read_only=True,
        )
        value = parameters_interface.declare_parameter(name, default_value, descriptor)
        apply_qos_override(policy, value, qos)
        logdebug("Declared qos parameter '%s' = %r", name, value)

    if options.callback is not None:
        result = options.callback(qos)
        if not result:
            raise InvalidProfileError(getattr(result, 'reason', ''))


def declare_publisher_qos_parameters(options, parameters_interface, topic_name, qos):
    """Same as `declare_qos_parameters()` for a publisher."""
    declare_qos_parameters(
        options, parameters_interface, topic_name, qos, PublisherQosParametersTraits)


def declare_subscription_qos_parameters(options, parameters_interface, topic_name, qos):
    """Same as `declare_qos_parameters()` for a subscription."""
    declare_qos_parameters(
        options, parameters_interface, topic_name, qos, SubscriptionQosParametersTraits)
