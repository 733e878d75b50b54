import enum

from libs.observable import Observable, ObservableField


class HttpMethod(enum.StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ContentType(enum.StrEnum):
    JSON = "application/json"
    XML = "application/xml"
    HTML = "text/html"
    TEXT = "text/plain"


class SubmitOutcome(enum.StrEnum):
    OK = "ok"
    CONTENT_TYPE_MISSING = "content_type_missing"
    MALFORMED_URL = "malformed_url"
    UNEXPECTED = "unexpected"
    BUSY = "busy"


def _to_method(value: HttpMethod | str | None) -> HttpMethod | None:
    if value is None or not str(value).strip():
        return None
    return HttpMethod(str(value).strip().upper())


def _to_content_type(value: ContentType | str | None) -> ContentType | None:
    if value is None or not str(value).strip():
        return None
    return ContentType(str(value).strip().lower())


def _to_text(value: str | None) -> str:
    return "" if value is None else value


class RequestState(Observable):
    """Fields the user edits on the request form."""

    url = ObservableField("", _to_text)
    method = ObservableField(None, _to_method)
    content_type = ObservableField(None, _to_content_type)
    body = ObservableField("", _to_text)


class ResponseState(Observable):
    """What the last successful dispatch returned."""

    body = ObservableField("", _to_text)
    header_summary = ObservableField("", _to_text)
    content_type = ObservableField("", _to_text)

    @property
    def is_empty(self) -> bool:
        return not (self.body or self.header_summary or self.content_type)

    def clear(self) -> None:
        """Reset every field; a failing listener is re-raised only after all are reset."""
        first_error: Exception | None = None
        for name in ("header_summary", "body", "content_type"):
            try:
                setattr(self, name, "")
            except Exception as e:
                first_error = first_error or e
        if first_error is not None:
            raise first_error
