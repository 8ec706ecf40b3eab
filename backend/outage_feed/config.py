from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Ausgrid planned outage feed
    ausgrid_planned_outages_url: str = Field(
        default="https://www.ausgrid.com.au/webapi/OutageListData/GetDetailedPlannedOutages"
    )
    # Total deadline for one upstream fetch (seconds); no retries
    upstream_timeout_seconds: float = Field(default=10.0)

    # Query defaults for /v1/ausgrid/planned
    default_window_days: int = Field(default=15)
    max_items_cap: int = Field(default=500)

    # Number of raw records returned by /ausgrid/outages
    preview_limit: int = Field(default=5)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO")

    # CORS
    cors_origins: str = Field(default="*")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",")]


settings = Settings()
