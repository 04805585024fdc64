class ConfigurationError(ValueError):
    """Raised when the stack cannot be declared from the given inputs.

    Construction stops at the first one, so no partial template is ever
    synthesized.
    """
