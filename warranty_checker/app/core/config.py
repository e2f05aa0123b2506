"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the service starts
without any configuration; in production you should at least override
``SECRET_KEY`` and ``ADMIN_TOKEN``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Warranty Checker")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Key used to sign anti-forgery nonces embedded in the lookup form.
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    # Nonce lifetime in seconds.  A day matches what most CMS hosts use
    # for public forms.
    nonce_lifetime: int = int(os.getenv("NONCE_LIFETIME", str(24 * 60 * 60)))

    # Static bearer token for the record management endpoints.  When empty
    # the admin API rejects every request.
    admin_token: str = os.getenv("ADMIN_TOKEN", "")

    # Path to the SQLite database.  Relative paths are resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "warranty_checker.db")

    # Directory receiving the generated stylesheet and script.  Relative
    # paths are resolved against the project root by the ``assets`` module.
    assets_dir: str = os.getenv("ASSETS_DIR", "assets")
    asset_version: str = os.getenv("ASSET_VERSION", "1.0.0")

    # Locale of the built-in message catalog (``vi`` or ``en``).
    locale: str = os.getenv("LOCALE", "vi")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must be
# set before importing this module.
settings = Settings()
