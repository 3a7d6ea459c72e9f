# src/design_auditor/errors.py


class DesignAuditorError(Exception):
    """Base class for all errors raised by the design auditor."""


class ConfigurationError(DesignAuditorError, ValueError):
    """
    Raised when the engine is called with invalid configuration
    (e.g. a non-positive max_depth). This is a programming mistake,
    never a property of the analysed tree.
    """


class InvalidColorError(DesignAuditorError, ValueError):
    """Raised when a hex color literal cannot be parsed."""
