class InvalidDurationException(Exception):
    """
    Raised when a duration string such as "3.05ms" cannot be parsed.
    """

    def __init__(self, *, message: str, duration: str) -> None:
        """
        Args:
            message: Human readable description of the failure
            duration: The text that failed to parse
        """
        self.message: str = message
        self.duration: str = duration
        super().__init__(message)
