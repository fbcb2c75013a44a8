# core/errors.py


class ConfigurationError(ValueError):
    """
    Raised while building cameras, geometry or materials from invalid
    parameters. Nothing is clamped: the offending value is reported.
    """


class InvariantError(RuntimeError):
    """
    Raised mid-render when geometry or material math produced a value that
    cannot be right, such as a non-unit normal or a color channel outside [0, 1].
    """
