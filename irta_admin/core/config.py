from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Values printed in the admin setup guidance, overridable from the environment."""

    # Firebase console the operator works in
    console_url: str = "https://console.firebase.google.com/"
    project_id: str = "irta-forms-app"

    # Example credentials for the first administrator
    admin_email: str = "admin@irta.local"
    admin_password: str = "Admin123!"

    # Firestore document that grants the admin role
    users_collection: str = "users"
    role_field: str = "role"
    admin_role: str = "admin"

    sdk_install_command: str = "npm install firebase-admin"

    affirmative_token: str = "y"
    log_level: LogLevel = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IRTA_",
        extra="ignore",
    )

    @field_validator("affirmative_token")
    @classmethod
    def _normalize_token(cls, value: str) -> str:
        token = value.strip().lower()
        if not token:
            raise ValueError("affirmative_token must not be blank")
        return token

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def login_hint(self) -> str:
        """Return the credentials pair shown once the user exists."""

        return f"{self.admin_email} / {self.admin_password}"


@lru_cache
def get_settings() -> Settings:
    """Cache settings to avoid re-parsing environment files."""
    return Settings()
