"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration on a developer machine.  In
a production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Vault API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs go to the console only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Path or ``sqlite:///`` URL of the SQLite database.  Relative paths
    # are resolved against the working directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "uservault.db")


# Instantiate settings once so the entry points can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes its defaults when this module is imported, environment
# variables should be set before importing it.  Code that needs other
# values (tests, embedders) passes its own ``Settings`` to ``create_app``.
settings = Settings()
