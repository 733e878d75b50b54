from dataclasses import dataclass, field, replace


def _split_content_type(value: str) -> tuple[str, dict[str, str]]:
    media_type, _, rest = value.partition(";")
    params: dict[str, str] = {}
    for part in rest.split(";"):
        key, sep, val = part.partition("=")
        if sep:
            params[key.strip().lower()] = val.strip().strip('"')
    return media_type.strip().lower(), params


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    timeout: float | None = None

    def with_headers(self, **headers: str) -> "Request":
        return replace(self, headers={**self.headers, **headers})


@dataclass(frozen=True)
class Response:
    status_code: int
    # (name, value) pairs in the order the server sent them
    headers: list[tuple[str, str]]
    body: bytes
    latency_ms: int
    request: Request

    def header(self, name: str, default: str | None = None) -> str | None:
        name = name.lower()
        for key, value in self.headers:
            if key.lower() == name:
                return value
        return default

    @property
    def content_type(self) -> str:
        """Media type without parameters, or an empty string."""
        value = self.header("content-type")
        if not value:
            return ""
        return _split_content_type(value)[0]

    @property
    def charset(self) -> str | None:
        value = self.header("content-type")
        if not value:
            return None
        return _split_content_type(value)[1].get("charset")

    def header_summary(self) -> str:
        return "\n".join(f"{key}: {value}" for key, value in self.headers)

    def text(self) -> str:
        encoding = self.charset or "utf-8"
        try:
            return self.body.decode(encoding, errors="replace")
        except LookupError:
            return self.body.decode("utf-8", errors="replace")
