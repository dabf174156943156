"""
Options controlling which QoS policies of an entity can be overridden.
"""

from .policies import QoSPolicyKind


class QosCallbackResult:
    """
    Result of a QoS validation callback.

    Truthy when the profile was accepted; `reason` explains a rejection.
    """

    def __init__(self, successful=True, reason=''):
        self.successful = successful
        self.reason = reason

    def __bool__(self):
        return bool(self.successful)

    def __repr__(self):
        return f'QosCallbackResult(successful={self.successful!r}, reason={self.reason!r})'


class QosOverridingOptions:
    """
    Per-entity QoS overriding options.

    Args:
        policy_kinds (iterable): Policy kinds that may be overridden. Kinds
            the entity type does not support are ignored.
        callback (callable): Optional validation callback taking the final
            QoSProfile and returning a bool or a QosCallbackResult
        entity_id (str): Disambiguates several entities of the same type on
            the same topic; empty when not needed
    """

    def __init__(self, policy_kinds, callback=None, entity_id=''):
        self.policy_kinds = frozenset(policy_kinds)
        self.callback = callback
        self.entity_id = entity_id or ''

    @classmethod
    def with_default_policies(cls, callback=None, entity_id=''):
        """Options allowing overrides of history, depth and reliability."""
        return cls(
            policy_kinds=(
                QoSPolicyKind.HISTORY,
                QoSPolicyKind.DEPTH,
                QoSPolicyKind.RELIABILITY,
            ),
            callback=callback,
            entity_id=entity_id,
        )

    def __repr__(self):
        kinds = sorted(str(k) for k in self.policy_kinds)
        return (
            f'QosOverridingOptions(policy_kinds={kinds!r}, '
            f'callback={self.callback!r}, entity_id={self.entity_id!r})'
        )
