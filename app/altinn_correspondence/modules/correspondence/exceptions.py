"""Errors for the correspondence module."""

SEND_FAILURE_PREFIX = "Could not send correspondence to Altinn 3"


def send_failure_message(cause: object) -> str:
    return f"{SEND_FAILURE_PREFIX}: {cause}"


class CorrespondenceServiceException(Exception):
    """Raised by the throw-based send adapter when a send fails.

    Attributes:
        message: human-friendly message
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
