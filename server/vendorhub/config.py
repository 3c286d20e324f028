import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List


DEFAULT_DATABASE_URL = "sqlite:///./vendor_management.db"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    env: str = "production"
    log_level: str = "INFO"
    secret_key: str = "vendorhub-dev-secret"
    access_token_expire_minutes: int = 60 * 12
    cors_origins: List[str] = field(default_factory=lambda: _split_origins(DEFAULT_CORS_ORIGINS))

    @property
    def is_development(self) -> bool:
        return self.env.lower() == "development"


def load_settings() -> Settings:
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        env=os.getenv("ENV", "production"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        secret_key=os.getenv("SECRET_KEY", "vendorhub-dev-secret"),
        access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 12))),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
    )


def configure_logging(level: str = "INFO") -> None:
    """Install a single stdout handler on the root logger.

    Existing handlers are dropped so repeated app construction (tests, reloads)
    does not duplicate output.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
