from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field

from ecommerce.settings.base import EcommerceBaseSettings


class AppSettings(EcommerceBaseSettings):
    """
    Application settings.
    Loaded from .env with exact variable name matching.
    """

    app_name: str = Field("E-commerce Order Management API", alias="APP_NAME")
    environment: str = Field("development", alias="APP_ENV")
    debug: bool = Field(False, alias="APP_DEBUG")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # "memory" keeps everything in-process; "sqlalchemy" uses DB_* settings
    persistence: Literal["memory", "sqlalchemy"] = Field(
        "memory", alias="PERSISTENCE_BACKEND"
    )


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings()
