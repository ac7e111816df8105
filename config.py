import logging
import os
from typing import Annotated, Any, List, Literal, Tuple, Type

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

ROOT_PATH = os.path.dirname(__file__)
DEFAULT_CONFIG_FILE = os.path.join(ROOT_PATH, "env.yaml")
DEV_JWT_SECRET = "dev-secret-key-change-in-production"

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    pass


def config_file_path() -> str:
    return os.environ.get("CRM_CONFIG_FILE", DEFAULT_CONFIG_FILE)


class Settings(BaseSettings):
    """
    Service configuration.

    Values come from keyword arguments, then environment variables, then the
    YAML file named by CRM_CONFIG_FILE (env.yaml beside this module by default).
    """

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    ENVIRONMENT: Literal["development", "production"] = "development"
    DB_URI: str = "sqlite+aiosqlite:///./crm.db"
    API_PORT: int = Field(default=8000, gt=0, lt=65536)
    API_HOST: str = "0.0.0.0"
    CORS_ORIGINS: Annotated[List[str], NoDecode] = []
    CORS_ALLOW_CREDENTIALS: bool = True
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    JWT_SECRET: str = Field(default=DEV_JWT_SECRET, min_length=1)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60, gt=0)
    APP_URL: str = "http://localhost:8000"

    # Outbound email
    SMTP_HOST: str = ""
    SMTP_PORT: int = Field(default=587, gt=0, lt=65536)
    SMTP_USE_TLS: bool = True
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_FROM: str = "noreply@localhost"

    # Tunables
    INVITE_EXPIRY_DAYS: int = Field(default=7, gt=0)
    PASSWORD_RESET_EXPIRY_MINUTES: int = Field(default=30, gt=0)
    RESET_RATE_LIMIT_WINDOW_MINUTES: int = Field(default=15, gt=0)
    RESET_RATE_LIMIT_MAX: int = Field(default=5, gt=0)
    CHANGE_PWD_RATE_LIMIT_WINDOW_MINUTES: int = Field(default=10, gt=0)
    CHANGE_PWD_RATE_LIMIT_MAX: int = Field(default=5, gt=0)
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)
    WORKSPACE_PREFERENCE_MAX_AGE_DAYS: int = Field(default=365, gt=0)

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, value: Any) -> Any:
        """Accept a comma separated string as well as a list"""
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("APP_URL")
    @classmethod
    def check_app_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value.rstrip("/")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=config_file_path()),
        )

    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


TUNABLES = (
    "INVITE_EXPIRY_DAYS",
    "PASSWORD_RESET_EXPIRY_MINUTES",
    "RESET_RATE_LIMIT_WINDOW_MINUTES",
    "RESET_RATE_LIMIT_MAX",
    "CHANGE_PWD_RATE_LIMIT_WINDOW_MINUTES",
    "CHANGE_PWD_RATE_LIMIT_MAX",
    "BCRYPT_ROUNDS",
    "WORKSPACE_PREFERENCE_MAX_AGE_DAYS",
)

PRODUCTION_REQUIRED = ("JWT_SECRET", "APP_URL", "DB_URI", "SMTP_HOST", "SMTP_FROM") + TUNABLES


def load_config(**overrides) -> Settings:
    """
    Build the settings from all sources.

    Raises:
        ConfigError: a value is missing its type or outside its bounds
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"Configuration validation failed: {problems}") from exc


def validate_config(config: Settings) -> None:
    """
    Startup checks that depend on the environment.

    Production needs every key in PRODUCTION_REQUIRED set explicitly and fails
    with ConfigError otherwise. Other environments only log.
    """
    if config.is_production():
        missing = [key for key in PRODUCTION_REQUIRED if key not in config.model_fields_set]
        if missing:
            raise ConfigError(
                "Configuration validation failed: "
                + "; ".join(f"{key} is required in production" for key in missing)
            )
        return

    if config.JWT_SECRET == DEV_JWT_SECRET:
        logger.warning("JWT_SECRET is the development default; set it before deploying")
    if not config.SMTP_HOST:
        logger.warning("SMTP_HOST is not set; outgoing emails are not delivered")


ApplicationConfig = load_config()
