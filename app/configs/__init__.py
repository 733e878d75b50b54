from pydantic import Field, computed_field
from pydantic_settings import SettingsConfigDict

from configs.common import CommonConfig
from configs.feature import FeatureConfig
from configs.packaging import PackagingInfo


class AppConfig(CommonConfig, FeatureConfig, PackagingInfo):
    PROJECT_NAME: str = Field(default="RESTly")

    model_config = SettingsConfigDict(
        # read from dotenv format config file
        env_file=".env",
        env_file_encoding="utf-8",
        # ignore extra attributes
        extra="ignore",
    )

    @computed_field
    def HTTP_USER_AGENT(self) -> str:
        return self.inner_HTTP_USER_AGENT or f"{self.PROJECT_NAME}/{self.CURRENT_VERSION}"


app_config: AppConfig = AppConfig()

__all__ = ["AppConfig", "app_config"]
