"""
Application Configuration
=============================================================================
CONCEPT: pydantic-settings (BaseSettings)
Instead of reading os.environ manually, we define a typed class that:
  1. Reads from .env file automatically
  2. Validates types (str, int, bool, float) at startup
  3. Fails fast if a variable has the wrong type

The startup collaborators (database file, schema, seeding, role lookup
file) are all driven from here, so a deployment only ever edits .env.
=============================================================================
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROLES_FILE = Path(__file__).parent / "data" / "roles.json"


class Settings(BaseSettings):
    """
    All application settings loaded from environment variables / .env file.

    - Each field maps to an environment variable (case-insensitive)
    - Field `port_number` reads env var `PORT_NUMBER`
    - Default values are used if the env var is not set
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Database ---
    database_url: str = "sqlite+aiosqlite:///./employees.db"
    query_timeout_seconds: float = 5.0

    # --- Seeding ---
    # generate_data always inserts; generate_data_if_empty only fills an empty table.
    generate_data: bool = False
    generate_data_if_empty: bool = True
    data_size: int = 10
    reset_database: bool = False

    # --- Lookup data ---
    roles_file: str = str(DEFAULT_ROLES_FILE)

    # --- Server ---
    host: str = "0.0.0.0"
    port_number: int = 9090

    # --- App ---
    app_name: str = "Employee Directory API"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"


# Process-wide defaults. create_app() accepts an explicit Settings instance,
# so tests never have to touch this one.
settings = Settings()
