from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    # JWT Configuration
    secret_key: str = Field(alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", alias="ALGORITHM")
    access_token_expire_minutes: int = Field(default=60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Frontend URL, used as the only allowed CORS origin
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    # Unauthenticated "first owner" lookup used by the demo dashboard
    demo_owner_lookup: bool = Field(default=True, alias="DEMO_OWNER_LOOKUP")

    default_country: str = Field(
        default="المملكة العربية السعودية", alias="DEFAULT_COUNTRY"
    )

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
