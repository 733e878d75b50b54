from pydantic import Field
from pydantic_settings import BaseSettings


class CommonConfig(BaseSettings):
    DEBUG: bool = Field(
        description="Enable debug mode for verbose extension loading logs",
        default=False,
    )

    LOG_SUPPRESS: str = Field(
        description="Comma-separated list of noisy loggers raised to WARNING",
        default="httpx,httpcore",
    )
