"""
Exceptions raised while declaring and applying QoS parameter overrides.
"""


class QoSOverridesException(Exception):
    """
    Base exception class for QoS override errors.
    """
    pass


class UnsupportedPolicyKindError(QoSOverridesException):
    """
    Raised when a policy kind with no value conversion reaches the codec.
    """

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f'unknown qos policy kind: {kind}')


class ValueConversionError(QoSOverridesException, ValueError):
    """
    Raised when a profile holds a policy value with no canonical string.
    """

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value
        super().__init__(f'unknown {kind} qos policy value: {{{value}}}')


class UnknownPolicyValueError(QoSOverridesException, ValueError):
    """
    Raised when an override string does not name a value of its policy.
    """

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value
        super().__init__(f'unknown qos policy {kind} value: {value}')


class InvalidProfileError(QoSOverridesException):
    """
    Raised when the validation callback rejects the overridden profile.
    """

    def __init__(self, reason=''):
        self.reason = reason
        message = 'validation callback failed'
        if reason:
            message += f': {reason}'
        super().__init__(message)


class ParameterException(Exception):
    """
    Base exception class for parameter store errors.
    """
    pass


class ParameterTypeError(ParameterException, TypeError):
    # Checked access with the wrong expected type.
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f'expected [{expected}] got [{actual}]')


class ParameterValueError(ParameterException, ValueError):
    pass


class InvalidParameterNameError(ParameterException, ValueError):
    pass


class ParameterAlreadyDeclaredError(ParameterException):
    def __init__(self, name):
        self.name = name
        super().__init__(f"parameter '{name}' has already been declared")


class ParameterNotDeclaredError(ParameterException, KeyError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"parameter '{name}' has not been declared")

    def __str__(self):
        return self.args[0]


class ParameterImmutableError(ParameterException):
    def __init__(self, name):
        self.name = name
        super().__init__(f"parameter '{name}' cannot be set because it is read-only")


class InvalidParameterTypeError(ParameterException):
    # An override does not have the type of the declared default.
    def __init__(self, name, expected, actual):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"parameter '{name}' has invalid type: expected [{expected}] got [{actual}]"
        )


class ParameterFileError(ParameterException):
    pass
