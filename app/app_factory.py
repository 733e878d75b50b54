import logging
import time

from configs import AppConfig, app_config
from services.alert_service import AlertSink, LoggingAlertSink
from services.request_composer import ClientFactory, RequestComposer

logger = logging.getLogger(__name__)


def initialize_extensions(config: AppConfig):
    from extensions import ext_logging

    extensions = [
        ext_logging,
    ]
    for ext in extensions:
        short_name = ext.__name__.split(".")[-1]
        start_time = time.perf_counter()
        ext.init_app(config)
        end_time = time.perf_counter()
        if config.DEBUG:
            logger.info(
                "Loaded %s (%s ms)",
                short_name,
                round((end_time - start_time) * 1000, 2),
            )


def create_composer(
    alert_sink: AlertSink | None = None,
    client_factory: ClientFactory | None = None,
    config: AppConfig = app_config,
) -> RequestComposer:
    initialize_extensions(config)
    composer = RequestComposer(
        alert_sink=alert_sink or LoggingAlertSink(),
        client_factory=client_factory,
        config=config,
    )
    logger.info(f"{config.PROJECT_NAME} {config.CURRENT_VERSION} composer ready")
    return composer
