"""Configuration management for pmboard."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

PMBOARD_HOME = Path(os.environ.get("PMBOARD_HOME", Path.home() / "pmboard"))
CONFIG_FILE = PMBOARD_HOME / "config" / "pmboard.conf"
DATA_DIR = PMBOARD_HOME / "data"

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
STORES = ("file", "firestore")
GRID_MODES = ("blank", "week")


@dataclass
class Config:
    """pmboard configuration."""

    store: str = "file"
    data_dir: str = ""
    firestore_project_id: str = ""
    firestore_api_key: str = ""
    firestore_database: str = "(default)"
    status_document: str = "settings/task-statuses"
    tasks_collection: str = "tasks"
    meetings_collection: str = "events"
    projects_collection: str = "projects"
    timezone: str = "UTC"
    week_start: str = "Sunday"
    grid_mode: str = "blank"

    @property
    def week_start_index(self) -> int:
        """Python weekday number (Monday=0) the calendar week starts on."""
        return WEEKDAYS.index(self.week_start.lower())

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def data_path(self) -> Path:
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def parse_config(text: str) -> Config:
    """Parse KEY=value lines into a Config. Bad values keep their defaults."""
    config = Config()

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "store":
                if value.lower() in STORES:
                    config.store = value.lower()
                else:
                    logger.warning(f"Unknown STORE {value!r}, using {config.store!r}")
            case "data_dir":
                config.data_dir = value
            case "firestore_project_id":
                config.firestore_project_id = value
            case "firestore_api_key":
                config.firestore_api_key = value
            case "firestore_database":
                config.firestore_database = value or config.firestore_database
            case "status_document":
                config.status_document = value.strip("/") or config.status_document
            case "tasks_collection":
                config.tasks_collection = value or config.tasks_collection
            case "meetings_collection":
                config.meetings_collection = value or config.meetings_collection
            case "projects_collection":
                config.projects_collection = value or config.projects_collection
            case "timezone":
                try:
                    ZoneInfo(value)
                    config.timezone = value
                except (ZoneInfoNotFoundError, ValueError):
                    logger.warning(f"Unknown TIMEZONE {value!r}, using {config.timezone!r}")
            case "week_start":
                if value.lower() in WEEKDAYS:
                    config.week_start = value.capitalize()
                else:
                    logger.warning(f"Invalid WEEK_START {value!r}, using {config.week_start!r}")
            case "grid_mode":
                if value.lower() in GRID_MODES:
                    config.grid_mode = value.lower()
                else:
                    logger.warning(f"Invalid GRID_MODE {value!r}, using {config.grid_mode!r}")

    return config


def load_config() -> Config:
    """Load configuration from pmboard.conf file."""
    if not CONFIG_FILE.exists():
        return Config()
    return parse_config(CONFIG_FILE.read_text())
