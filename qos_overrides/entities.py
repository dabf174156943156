"""
Resolution of the final QoS profile of a publisher or subscription.

These helpers are what an entity constructor calls before creating the
endpoint: they expand the topic name, run the override pass on a copy of the
requested profile and hand back the profile the endpoint must be created
with. If the pass fails the exception propagates and the caller's profile is
left as it was.
"""

from .engine import declare_publisher_qos_parameters, declare_subscription_qos_parameters
from .names import expand_topic_name


def _resolve_qos(declare, parameters_interface, topic_name, qos, options, namespace, node_name):
    resolved = qos.copy()
    if options is None:
        return resolved
    topic = expand_topic_name(topic_name, namespace=namespace, node_name=node_name)
    declare(options, parameters_interface, topic, resolved)
    return resolved


def resolve_publisher_qos(
    parameters_interface,
    topic_name,
    qos,
    options=None,
    namespace='/',
    node_name=None,
):
    """
    Get the QoS profile a publisher must be created with.

    Args:
        parameters_interface: Parameter store the override parameters are declared on
        topic_name (str): Topic name, absolute, relative or private (~/)
        qos (QoSProfile): Requested profile; never modified
        options (QosOverridingOptions): Overriding options, or None to skip overrides
        namespace (str): Namespace of the node, used to expand relative names
        node_name (str): Name of the node, used to expand private names

    Returns:
        QoSProfile: New profile with the overrides applied
    """
    return _resolve_qos(
        declare_publisher_qos_parameters,
        parameters_interface, topic_name, qos, options, namespace, node_name)


def resolve_subscription_qos(
    parameters_interface,
    topic_name,
    qos,
    options=None,
    namespace='/',
    node_name=None,
):
    """
    Get the QoS profile a subscription must be created with.

    Same as `resolve_publisher_qos()`, except that lifespan is never
    declared.
    """
    return _resolve_qos(
        declare_subscription_qos_parameters,
        parameters_interface, topic_name, qos, options, namespace, node_name)
