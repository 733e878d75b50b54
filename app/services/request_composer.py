import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from configs import AppConfig, app_config
from exceptions.common import (
    ComposerError,
    ContentTypeMissingError,
    MalformedUrlError,
    UnexpectedError,
)
from extensions.ext_logging import trace_id_generator, trace_id_var
from libs.http_client import (
    HttpClient,
    Request,
    Response,
    headers_middleware,
    logging_middleware,
)
from libs.observable import Observable, ObservableField
from models.rest import (
    ContentType,
    HttpMethod,
    RequestState,
    ResponseState,
    SubmitOutcome,
)
from services.alert_service import AlertSink

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], HttpClient]

ALLOWED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class SubmitResult:
    outcome: SubmitOutcome
    message: str = ""
    response: Response | None = None

    @property
    def ok(self) -> bool:
        return self.outcome == SubmitOutcome.OK


def parse_url(raw: str) -> str:
    """Normalise a user-entered URL or raise ``MalformedUrlError``."""
    candidate = raw.strip()
    if not candidate:
        raise MalformedUrlError()
    try:
        url = httpx.URL(candidate)
    except (httpx.InvalidURL, ValueError) as e:
        raise MalformedUrlError() from e
    if url.scheme not in ALLOWED_SCHEMES or not url.host:
        raise MalformedUrlError()
    return str(url)


class RequestComposer(Observable):
    """
    View-model behind the request form.

    Holds the editable request fields and the last response, builds and
    dispatches one request at a time, and reports failures through the
    alert sink. Field changes on ``request`` and ``response`` are relayed to
    the composer's own subscribers, response fields prefixed ``response.``.
    """

    is_submitting = ObservableField(False, bool)

    def __init__(
        self,
        alert_sink: AlertSink,
        client_factory: ClientFactory | None = None,
        config: AppConfig = app_config,
    ):
        super().__init__()
        self._alert_sink = alert_sink
        self._config = config
        self._client_factory = client_factory or self._create_client
        self.request = RequestState()
        self.response = ResponseState()
        self.request.subscribe(self.notify_changed)
        self.response.subscribe(self._on_response_changed)

    @property
    def request_methods(self) -> list[str]:
        return [method.value for method in HttpMethod]

    @property
    def content_types(self) -> list[str]:
        return [content_type.value for content_type in ContentType]

    def _on_response_changed(self, field: str) -> None:
        self.notify_changed(f"response.{field}")

    def _create_client(self) -> HttpClient:
        return HttpClient(
            middlewares=[
                headers_middleware(**{"User-Agent": self._config.HTTP_USER_AGENT}),
                logging_middleware(logger),
            ],
            default_timeout=self._config.HTTP_TIMEOUT,
            follow_redirects=self._config.HTTP_FOLLOW_REDIRECTS,
        )

    def can_submit(self) -> bool:
        return bool(self.request.url.strip()) and self.request.method is not None

    def can_show_header(self) -> bool:
        return bool(self.response.header_summary.strip())

    def build_request(self) -> Request:
        state = self.request
        has_body = bool(state.body.strip())
        if has_body and state.content_type is None:
            raise ContentTypeMissingError()

        url = parse_url(state.url)
        if state.method is None:
            raise UnexpectedError("no request method selected")

        headers: dict[str, str] = {}
        body = b""
        if has_body:
            headers["Content-Type"] = f"{state.content_type.value}; charset=utf-8"
            body = state.body.encode("utf-8")

        return Request(
            method=state.method.value,
            url=url,
            headers=headers,
            body=body,
            timeout=self._config.HTTP_TIMEOUT,
        )

    async def submit(self) -> SubmitResult:
        if self.is_submitting:
            logger.warning("Submit ignored, a request is already in flight")
            return SubmitResult(outcome=SubmitOutcome.BUSY)

        token = trace_id_var.set(trace_id_generator())
        try:
            return await self._submit()
        finally:
            self._finish_submitting()
            trace_id_var.reset(token)

    async def _submit(self) -> SubmitResult:
        try:
            self.is_submitting = True
            self.response.clear()
            request = self.build_request()
            async with self._client_factory() as client:
                response = await client.send(request)
            self._apply_response(response)
        except ComposerError as e:
            logger.info(f"Submit rejected: {e.detail}")
            error = e
        except Exception as e:
            logger.exception("Unexpected error while dispatching request")
            error = UnexpectedError.from_exception(e)
        else:
            return SubmitResult(outcome=SubmitOutcome.OK, response=response)

        self._discard_response()
        await self._alert_sink.alert(
            error.detail,
            self._config.ALERT_ERROR_TITLE,
            self._config.ALERT_ACKNOWLEDGE_LABEL,
        )
        return SubmitResult(outcome=error.outcome, message=error.detail)

    def _apply_response(self, response: Response) -> None:
        body = response.text()
        header_summary = response.header_summary()
        content_type = response.content_type

        self.response.body = body
        self.response.header_summary = header_summary
        self.response.content_type = content_type

    def _discard_response(self) -> None:
        # a failed submit must not leave a partially applied response behind
        if self.response.is_empty:
            return
        try:
            self.response.clear()
        except Exception:
            logger.exception("Change listener failed while discarding the response")

    def _finish_submitting(self) -> None:
        try:
            self.is_submitting = False
        except Exception:
            logger.exception("Change listener failed after submit finished")

    async def show_header(self) -> None:
        if not self.can_show_header():
            return
        await self._alert_sink.alert(
            self.response.header_summary,
            self._config.ALERT_HEADER_TITLE,
            self._config.ALERT_ACKNOWLEDGE_LABEL,
        )
