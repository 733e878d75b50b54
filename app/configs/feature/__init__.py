from pydantic import AliasChoices, Field, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings


class LoggingConfig(BaseSettings):
    """
    Configuration for application logging
    """

    LOG_LEVEL: str = Field(
        description="Logging level, default to INFO. Set to ERROR for production environments.",
        default="INFO",
    )

    LOG_FILE: str | None = Field(
        description="File path for log output.",
        default=None,
    )

    LOG_FILE_MAX_SIZE: PositiveInt = Field(
        description="Maximum file size for file rotation retention, the unit is megabytes (MB)",
        default=20,
    )

    LOG_FILE_BACKUP_COUNT: PositiveInt = Field(
        description="Maximum file backup count file rotation retention",
        default=5,
    )

    LOG_FORMAT: str = Field(
        description="Format string for log messages",
        default=(
            "%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] "
            "[%(filename)s:%(lineno)d] %(trace_id)s - %(message)s"
        ),
    )

    LOG_DATEFORMAT: str | None = Field(
        description="Date format string for log timestamps",
        default=None,
    )

    LOG_TZ: str | None = Field(
        description="Timezone for log timestamps (e.g., 'America/New_York')",
        default="UTC",
    )


class HttpConfig(BaseSettings):
    """
    Outbound HTTP settings used when dispatching composed requests
    """

    HTTP_TIMEOUT: PositiveFloat | None = Field(
        description="Timeout in seconds for a dispatched request. Leave unset to use the transport default.",
        default=None,
    )

    HTTP_FOLLOW_REDIRECTS: bool = Field(
        description="Whether redirect responses are followed automatically",
        default=True,
    )

    inner_HTTP_USER_AGENT: str = Field(
        description="User-Agent header sent with every request. Defaults to <PROJECT_NAME>/<CURRENT_VERSION>.",
        validation_alias=AliasChoices("HTTP_USER_AGENT"),
        default="",
    )


class AlertConfig(BaseSettings):
    """
    Labels used when surfacing messages through the alert sink
    """

    ALERT_ERROR_TITLE: str = Field(
        description="Dialog title for failed submissions",
        default="Error",
    )

    ALERT_HEADER_TITLE: str = Field(
        description="Dialog title when showing the response headers",
        default="ResponseHeader",
    )

    ALERT_ACKNOWLEDGE_LABEL: str = Field(
        description="Label of the button that dismisses an alert",
        default="OK",
    )


class FeatureConfig(
    LoggingConfig,
    HttpConfig,
    AlertConfig,
):
    pass
