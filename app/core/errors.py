class GameAPIError(Exception):
    """Base class for failures while talking to the generation services"""


class UpstreamCallError(GameAPIError):
    """Text generation call failed (network, auth, rate limit, server error)"""


class UpstreamParseError(GameAPIError):
    """Text generation returned something that is not a JSON object"""

    def __init__(self, message: str, raw_content: str | None = None):
        super().__init__(message)
        self.raw_content = raw_content


class SecondaryCallError(GameAPIError):
    """Image generation failed. Never surfaced to the caller."""
