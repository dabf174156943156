"""
Signed nanosecond Duration used by the deadline, lifespan and liveliness
lease duration policies.
"""

INT64_MAX = 2 ** 63 - 1
INT64_MIN = -2 ** 63

_NSECS_PER_SEC = 1000000000


def _saturate(nsecs):
    return max(INT64_MIN, min(INT64_MAX, nsecs))


class Duration:
    """
    Span of time stored as a signed 64-bit nanosecond count.

    Values outside the int64 range saturate, so the infinite duration
    (seconds 9223372036, nanoseconds 854775807) is exactly int64 max.
    """

    __slots__ = ('_nanoseconds',)

    def __init__(self, secs=0, nsecs=0):
        """
        Create a Duration instance.

        Args:
            secs (int): Seconds component; use from_sec() for fractional seconds
            nsecs (int): Nanoseconds component

        Raises:
            ValueError: If a component is a float with a fractional part
        """
        for component in (secs, nsecs):
            if isinstance(component, float) and not component.is_integer():
                raise ValueError(
                    f'Duration components must be integral, got {component!r}; '
                    'use Duration.from_sec() for fractional seconds'
                )
        self._nanoseconds = _saturate(int(secs) * _NSECS_PER_SEC + int(nsecs))

    @staticmethod
    def from_sec(float_secs):
        """
        Create a Duration from a float representing seconds.

        Args:
            float_secs (float): Duration in seconds

        Returns:
            Duration: Duration instance
        """
        secs = int(float_secs)
        nsecs = int(round((float_secs - secs) * 1e9))
        return Duration(secs, nsecs)

    @staticmethod
    def from_nanoseconds(nsecs):
        """
        Create a Duration from a nanosecond count.

        Args:
            nsecs (int): Duration in nanoseconds

        Returns:
            Duration: Duration instance
        """
        return Duration(0, nsecs)

    @staticmethod
    def infinite():
        return Duration(0, INT64_MAX)

    @property
    def nanoseconds(self):
        return self._nanoseconds

    @property
    def secs(self):
        """Get the seconds component"""
        return self._nanoseconds // _NSECS_PER_SEC

    @property
    def nsecs(self):
        """Get the nanoseconds component"""
        return self._nanoseconds % _NSECS_PER_SEC

    def is_infinite(self):
        return self._nanoseconds == INT64_MAX

    def to_sec(self):
        """
        Convert to float seconds.

        Returns:
            float: Duration in seconds
        """
        return self._nanoseconds / 1e9

    def to_nsec(self):
        """
        Convert to integer nanoseconds.

        Returns:
            int: Duration in nanoseconds
        """
        return self._nanoseconds

    def __add__(self, other):
        """Add two Durations"""
        if isinstance(other, Duration):
            return Duration.from_nanoseconds(self._nanoseconds + other._nanoseconds)
        return NotImplemented

    def __sub__(self, other):
        """Subtract two Durations"""
        if isinstance(other, Duration):
            return Duration.from_nanoseconds(self._nanoseconds - other._nanoseconds)
        return NotImplemented

    def __mul__(self, other):
        """Multiply Duration by a scalar"""
        if isinstance(other, (int, float)):
            return Duration.from_nanoseconds(int(self._nanoseconds * other))
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanoseconds == other._nanoseconds

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanoseconds < other._nanoseconds

    def __le__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanoseconds <= other._nanoseconds

    def __gt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanoseconds > other._nanoseconds

    def __ge__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanoseconds >= other._nanoseconds

    def __hash__(self):
        return hash(self._nanoseconds)

    def __repr__(self):
        return f"Duration(secs={self.secs}, nsecs={self.nsecs})"
