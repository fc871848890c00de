"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, which is what a local
demo needs.  Override values via environment variables before the
module is imported.
"""

import os
from dataclasses import dataclass
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo BFF")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows every
    # origin, which is what the single‑page client uses in development.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Serve the GraphiQL IDE on ``GET /graphql``.
    graphiql: bool = _env_flag("GRAPHIQL", "true")

    # Populate the in‑memory store with demo tasks at startup.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA", "true")

    @property
    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list of origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
