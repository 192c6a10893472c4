from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "macOS SYSTEM AUDIT"
    debug: bool = False
    log_level: str = "WARNING"

    # --- output ---
    reports_dir: str = str(BASE_DIR.parent / "reports")

    # --- host queries ---
    command_timeout: float = 10.0  # seconds per external command
    network_interface: str = "en0"
    data_volume: str = "/System/Volumes/Data"
    setup_marker: str = "/var/db/.AppleSetupDone"
    reboot_history_limit: int = 10
    releases_file: str = str(DATA_DIR / "os_releases.yaml")

    # --- references ---
    warranty_url: str = "https://checkcoverage.apple.com"

    model_config = {"env_file": ".env", "env_prefix": "MACAUDIT_"}


settings = Settings()
