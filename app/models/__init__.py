from .rest import (
    ContentType,
    HttpMethod,
    RequestState,
    ResponseState,
    SubmitOutcome,
)

__all__ = [
    "ContentType",
    "HttpMethod",
    "RequestState",
    "ResponseState",
    "SubmitOutcome",
]
