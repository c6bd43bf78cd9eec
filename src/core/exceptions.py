class ConfigError(Exception):
    """Raised when config loading or validation fails."""


class QueryRequired(Exception):
    """Raised when a request arrives without a usable query."""


class UpstreamError(Exception):
    """Raised when the generation service call fails."""


class MalformedCompletion(Exception):
    """Raised when a completion is not valid JSON and the policy is to fail."""

    def __init__(self, text: str, reason: str = ""):
        super().__init__(reason or "Completion is not valid JSON")
        self.text = text
