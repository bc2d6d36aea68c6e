"""Errors raised at the LLM provider boundary.

Providers translate SDK and transport exceptions into these types so that
callers only need to know about one hierarchy.
"""


class LLMError(Exception):
    """Base class for every provider failure."""


class TransportError(LLMError):
    """The request did not complete with a successful status.

    Covers connection failures, authentication failures and non-2xx
    responses alike.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PayloadError(LLMError):
    """The response arrived but had no usable candidate text.

    Safety filtering that returns an empty candidate list ends up here.
    """
