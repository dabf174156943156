# Policy kinds that each entity type allows to be overridden.

from .policies import QoSPolicyKind


class PublisherQosParametersTraits:
    entity_type = 'publisher'
    allowed_policies = (
        QoSPolicyKind.AVOID_ROS_NAMESPACE_CONVENTIONS,
        QoSPolicyKind.DEADLINE,
        QoSPolicyKind.DURABILITY,
        QoSPolicyKind.HISTORY,
        QoSPolicyKind.DEPTH,
        QoSPolicyKind.LIFESPAN,
        QoSPolicyKind.LIVELINESS,
        QoSPolicyKind.LIVELINESS_LEASE_DURATION,
        QoSPolicyKind.RELIABILITY,
    )


class SubscriptionQosParametersTraits:
    entity_type = 'subscription'
    # Lifespan only applies to the writing side.
    allowed_policies = (
        QoSPolicyKind.AVOID_ROS_NAMESPACE_CONVENTIONS,
        QoSPolicyKind.DEADLINE,
        QoSPolicyKind.DURABILITY,
        QoSPolicyKind.HISTORY,
        QoSPolicyKind.DEPTH,
        QoSPolicyKind.LIVELINESS,
        QoSPolicyKind.LIVELINESS_LEASE_DURATION,
        QoSPolicyKind.RELIABILITY,
    )


_TRAITS = {
    traits.entity_type: traits
    for traits in (PublisherQosParametersTraits, SubscriptionQosParametersTraits)
}


def get_traits(entity_type):
    try:
        return _TRAITS[entity_type]
    except KeyError:
        raise ValueError(f'unknown entity type: {entity_type!r}') from None


def allowed_policies(entity_type):
    """
    Get the policy kinds an entity type allows to be overridden.

    Args:
        entity_type (str): 'publisher' or 'subscription'

    Returns:
        tuple: QoSPolicyKind values in declaration order
    """
    return get_traits(entity_type).allowed_policies
