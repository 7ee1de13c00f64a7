from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode


class CommanderSettings(BaseSettings):
    bot_prefix: str | None = Field(default="!", description="Command prefix, empty to require a mention")
    bot_owner: Annotated[list[str], NoDecode] = Field(
        default_factory=list, description="Addresses of the bot owners"
    )
    owner_override: bool = Field(default=True, description="Owners always pass permission checks")

    environment: str = Field(default="development", description="Environment")
    log_level: str = Field(default="INFO", description="Logging level")

    # Console host
    bot_address: str = Field(default="commander", description="Address the console bot answers to")
    console_address: str = Field(default="console", description="Address of the console user")

    @field_validator("bot_owner", mode="before")
    @classmethod
    def _split_owner(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, (str, int)):
            return [part.strip() for part in str(value).split(",") if part.strip()]
        return [str(item) for item in value]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = CommanderSettings()
