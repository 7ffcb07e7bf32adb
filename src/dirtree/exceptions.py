SIZE_WITH_DEPTH_MESSAGE = "usage of size attribute with depth option is prohibited"


class ConfigurationError(ValueError):
    """
    Exception raised when tree options are invalid or contradictory.

    Configuration is validated before any filesystem access happens, so this error
    never leaves a partially built tree behind. The most common cause is requesting
    the ``size`` attribute together with a ``depth`` limit: a depth-truncated
    subtree cannot produce a correct aggregate size.

    Example:
        >>> error = ConfigurationError(SIZE_WITH_DEPTH_MESSAGE)
        >>> str(error)
        'usage of size attribute with depth option is prohibited'
        >>> isinstance(error, ValueError)
        True
    """

    pass
