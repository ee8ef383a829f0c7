class ConfigurationError(Exception):
    """
    Exception raised when an exclusion configuration table is malformed.

    The builtin configuration loader catches this exception and falls back to an
    empty configuration, so it only escapes when parse_exclusion_config() is
    called directly.

    Attributes:
        key (str): The configuration key that failed validation.

    Example:
        >>> error = ConfigurationError("exclude_dirs", "expected a list of strings")
        >>> str(error)
        "Invalid value for 'exclude_dirs': expected a list of strings"
    """

    def __init__(self, key: str, reason: str) -> None:
        """
        Initialize the exception with the offending key and a reason.

        Args:
            key (str): The configuration key that failed validation.
            reason (str): Human-readable description of the problem.
        """
        self.key = key
        super().__init__(f"Invalid value for '{key}': {reason}")
