"""Pipeline error types and their HTTP status mapping"""

GENERIC_FAILURE_MESSAGE = "Failed to build script style."


class StyleScriptError(Exception):
    """Base class for pipeline failures"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedChannelUrlError(StyleScriptError):
    status_code = 400

    def __init__(self, message: str = "Unsupported YouTube channel link. Try a different URL."):
        super().__init__(message)


class ChannelNotFoundError(StyleScriptError):
    status_code = 404

    def __init__(self, message: str = "Unable to find the provided channel."):
        super().__init__(message)


class NoTranscriptsError(StyleScriptError):
    status_code = 422

    def __init__(
        self,
        message: str = "Transcripts are unavailable for the recent uploads. Try a different channel.",
    ):
        super().__init__(message)


class YouTubeAPIError(StyleScriptError):
    """Non-success response or embedded error from the YouTube Data API"""


class ModelResponseError(StyleScriptError):
    """The style model returned something we cannot use"""


class JSONExtractionError(ModelResponseError):
    """No parseable JSON object in free-form model output"""


class ScriptGenerationError(StyleScriptError):
    """The script model returned an empty script"""


def status_for_error(exc: Exception) -> tuple[int, str]:
    """
    Map a pipeline failure to an HTTP status and the message to expose

    Client-facing conditions (400/404/422) carry their own status. Anything
    else is an upstream failure: quota problems become 429 and credential
    problems 401, both echoing the raised message; the rest is a generic 500.
    """
    if isinstance(exc, StyleScriptError) and exc.status_code != 500:
        return exc.status_code, exc.message

    message = str(exc) or GENERIC_FAILURE_MESSAGE
    if "quota" in message:
        return 429, message
    if "API key" in message:
        return 401, message
    return 500, GENERIC_FAILURE_MESSAGE
