"""
Error types raised while talking to the match API.

Both are caught by the provider and turned into a failed FetchResult;
they never escape a pipeline run.
"""


class HttpError(Exception):
    """Upstream answered with a non-2xx status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! Status: {status_code}")


class UnexpectedDataError(Exception):
    """Response JSON was present but not in the expected shape."""

    def __init__(self, message: str):
        self.detail = message
        super().__init__(f"Unexpected data format: {message}")
