class LinkedineseError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code

class InputValidationError(LinkedineseError):
    """Bad request body: missing, empty or oversized text."""
    status_code = 400

class ConfigurationError(LinkedineseError):
    """No usable provider credential. Needs operator action."""
    status_code = 500

class UpstreamError(LinkedineseError):
    """Non-2xx from the LLM provider; carries the provider's status code."""

    def __init__(self, status_code: int):
        super().__init__("Failed to get a response from the AI service.", status_code)
