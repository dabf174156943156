"""
QoS profile record and the preset profiles.
"""

from .duration import Duration
from .policies import (
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    ReliabilityPolicy,
)


class QoSProfile:
    """
    Mutable set of the QoS policy values attached to one endpoint.

    Unset durations default to zero, which the middleware reads as
    "unspecified".
    """

    __slots__ = (
        'history',
        'depth',
        'reliability',
        'durability',
        'deadline',
        'lifespan',
        'liveliness',
        'liveliness_lease_duration',
        'avoid_ros_namespace_conventions',
    )

    def __init__(
        self,
        history=HistoryPolicy.KEEP_LAST,
        depth=10,
        reliability=ReliabilityPolicy.RELIABLE,
        durability=DurabilityPolicy.VOLATILE,
        deadline=None,
        lifespan=None,
        liveliness=LivelinessPolicy.SYSTEM_DEFAULT,
        liveliness_lease_duration=None,
        avoid_ros_namespace_conventions=False,
    ):
        self.history = history
        self.depth = depth
        self.reliability = reliability
        self.durability = durability
        self.deadline = deadline if deadline is not None else Duration()
        self.lifespan = lifespan if lifespan is not None else Duration()
        self.liveliness = liveliness
        self.liveliness_lease_duration = (
            liveliness_lease_duration
            if liveliness_lease_duration is not None
            else Duration()
        )
        self.avoid_ros_namespace_conventions = avoid_ros_namespace_conventions

    def copy(self):
        """
        Get an independent copy of this profile.

        Returns:
            QoSProfile: Copy holding the same policy values
        """
        return QoSProfile(**self.asdict())

    def asdict(self):
        return {slot: getattr(self, slot) for slot in self.__slots__}

    def __eq__(self, other):
        if not isinstance(other, QoSProfile):
            return NotImplemented
        return self.asdict() == other.asdict()

    def __repr__(self):
        fields = ', '.join(f'{slot}={getattr(self, slot)!r}' for slot in self.__slots__)
        return f'QoSProfile({fields})'


def create_qos_profile(queue_size=10, latch=False, reliable=True):
    """
    Create a keep-last QoS profile from queue-style settings.

    Args:
        queue_size (int): The depth of the message queue
        latch (bool): If True, uses TRANSIENT_LOCAL durability so late
                      subscribers get the last message
        reliable (bool): Whether to use reliable communication

    Returns:
        QoSProfile: A configured QoS profile
    """
    return QoSProfile(
        history=HistoryPolicy.KEEP_LAST,
        depth=queue_size,
        reliability=(
            ReliabilityPolicy.RELIABLE
            if reliable
            else ReliabilityPolicy.BEST_EFFORT
        ),
        durability=(
            DurabilityPolicy.TRANSIENT_LOCAL if latch else DurabilityPolicy.VOLATILE
        ),
    )


_PRESET_PROFILES = {
    'default': QoSProfile(),
    'sensor_data': QoSProfile(
        depth=5,
        reliability=ReliabilityPolicy.BEST_EFFORT,
    ),
    'system_default': QoSProfile(
        history=HistoryPolicy.SYSTEM_DEFAULT,
        depth=0,
        reliability=ReliabilityPolicy.SYSTEM_DEFAULT,
        durability=DurabilityPolicy.SYSTEM_DEFAULT,
    ),
    'services_default': QoSProfile(),
    'parameters': QoSProfile(depth=1000),
    'parameter_events': QoSProfile(depth=1000),
    'best_available': QoSProfile(
        depth=10,
        reliability=ReliabilityPolicy.BEST_AVAILABLE,
        durability=DurabilityPolicy.BEST_AVAILABLE,
        liveliness=LivelinessPolicy.BEST_AVAILABLE,
    ),
}


def get_preset_profile(name):
    """
    Get a fresh copy of a preset profile.

    Args:
        name (str): One of 'default', 'sensor_data', 'system_default',
                    'services_default', 'parameters', 'parameter_events',
                    'best_available'

    Returns:
        QoSProfile: Copy of the preset, safe to mutate

    Raises:
        KeyError: If there is no preset with that name
    """
    return _PRESET_PROFILES[name].copy()


def preset_profile_names():
    return tuple(_PRESET_PROFILES)
