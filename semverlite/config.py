from typing import Literal, Optional

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Runtime settings for the command line tools.

    - SEMVERLITE_LOG_LEVEL: DEBUG, INFO, WARNING (default), ERROR or CRITICAL
    - SEMVERLITE_CONSOLE_WIDTH: fixed console width, detected when unset
    - NO_COLOR: any non-empty value disables colour (https://no-color.org)
    """

    log_level: LogLevel = Field(default="WARNING")
    console_width: Optional[PositiveInt] = Field(default=None)
    no_color: bool = Field(default=False, validation_alias="NO_COLOR")

    model_config = {
        "env_prefix": "SEMVERLITE_",
        "env_ignore_empty": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("no_color", mode="before")
    @classmethod
    def _any_value_disables_color(cls, value):
        if isinstance(value, str):
            return value != ""
        return value
