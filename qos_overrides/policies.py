"""
QoS policy kinds, policy value enumerations and their string lookup tables.
"""

from enum import Enum, IntEnum


class QoSPolicyKind(Enum):
    """
    Identifier of a QoS policy that can be exposed as a parameter.

    The value of each member is the token used in parameter names.
    """

    INVALID = 'invalid'
    AVOID_ROS_NAMESPACE_CONVENTIONS = 'avoid_ros_namespace_conventions'
    DEADLINE = 'deadline'
    DURABILITY = 'durability'
    HISTORY = 'history'
    DEPTH = 'depth'
    LIFESPAN = 'lifespan'
    LIVELINESS = 'liveliness'
    LIVELINESS_LEASE_DURATION = 'liveliness_lease_duration'
    RELIABILITY = 'reliability'

    def __str__(self):
        return self.value


def qos_policy_kind_to_str(kind):
    """
    Get the parameter token of a policy kind.

    Args:
        kind (QoSPolicyKind): Policy kind

    Returns:
        str or None: The token, or None for INVALID and non-kinds
    """
    if not isinstance(kind, QoSPolicyKind) or kind is QoSPolicyKind.INVALID:
        return None
    return kind.value


def qos_policy_kind_from_str(text):
    """
    Get the policy kind named by a parameter token.

    Args:
        text (str): Token, e.g. 'liveliness_lease_duration'

    Returns:
        QoSPolicyKind: The matching kind, or INVALID if there is none
    """
    try:
        kind = QoSPolicyKind(text)
    except ValueError:
        return QoSPolicyKind.INVALID
    return kind


class DurabilityPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    TRANSIENT_LOCAL = 1
    VOLATILE = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class HistoryPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    KEEP_LAST = 1
    KEEP_ALL = 2
    UNKNOWN = 3


class LivelinessPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    AUTOMATIC = 1
    # Deprecated, has no string form.
    MANUAL_BY_NODE = 2
    MANUAL_BY_TOPIC = 3
    UNKNOWN = 4
    BEST_AVAILABLE = 5


class ReliabilityPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    RELIABLE = 1
    BEST_EFFORT = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class PolicyStringTable:
    """
    Two-way mapping between the values of one policy enumeration and their
    canonical strings.

    Values missing from the table (UNKNOWN, deprecated members) have no
    string; strings missing from the table resolve to the policy's UNKNOWN
    member.
    """

    def __init__(self, policy_type, names):
        self.policy_type = policy_type
        self._to_str = dict(names)
        self._from_str = {text: value for value, text in self._to_str.items()}

    def to_str(self, value):
        """
        Convert a policy value to its canonical string.

        Args:
            value: Member of the policy enumeration, or its integer value

        Returns:
            str or None: Canonical string, or None when the value is unmapped
        """
        try:
            value = self.policy_type(value)
        except (ValueError, TypeError):
            return None
        return self._to_str.get(value)

    def from_str(self, text):
        """
        Convert a canonical string to its policy value.

        Args:
            text (str): Canonical string, compared exactly

        Returns:
            The matching member, or the UNKNOWN member
        """
        return self._from_str.get(text, self.policy_type.UNKNOWN)

    def strings(self):
        return tuple(self._to_str.values())

    def __repr__(self):
        return f'PolicyStringTable({self.policy_type.__name__})'


DURABILITY_STRINGS = PolicyStringTable(DurabilityPolicy, {
    DurabilityPolicy.SYSTEM_DEFAULT: 'system_default',
    DurabilityPolicy.TRANSIENT_LOCAL: 'transient_local',
    DurabilityPolicy.VOLATILE: 'volatile',
    DurabilityPolicy.BEST_AVAILABLE: 'best_available',
})

HISTORY_STRINGS = PolicyStringTable(HistoryPolicy, {
    HistoryPolicy.SYSTEM_DEFAULT: 'system_default',
    HistoryPolicy.KEEP_LAST: 'keep_last',
    HistoryPolicy.KEEP_ALL: 'keep_all',
})

LIVELINESS_STRINGS = PolicyStringTable(LivelinessPolicy, {
    LivelinessPolicy.SYSTEM_DEFAULT: 'system_default',
    LivelinessPolicy.AUTOMATIC: 'automatic',
    LivelinessPolicy.MANUAL_BY_TOPIC: 'manual_by_topic',
    LivelinessPolicy.BEST_AVAILABLE: 'best_available',
})

RELIABILITY_STRINGS = PolicyStringTable(ReliabilityPolicy, {
    ReliabilityPolicy.SYSTEM_DEFAULT: 'system_default',
    ReliabilityPolicy.RELIABLE: 'reliable',
    ReliabilityPolicy.BEST_EFFORT: 'best_effort',
    ReliabilityPolicy.BEST_AVAILABLE: 'best_available',
})
