"""Core constants used across recordkeeper modules.

This module centralizes file names, payload keys and CLI defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

APP_NAME = "recordkeeper"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "CRUD CLI Application"
BANNER_TEXT = "CRUD CLI"
DEFAULT_DATA_FILE = Path("data.json")
DATA_FILE_ENV_VAR = "RECORDKEEPER_DATA_FILE"
LOG_LEVEL_ENV_VAR = "RECORDKEEPER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
CONTAINER_ITEMS_KEY = "items"
RECORD_ID_FIELD = "id"
RECORD_NAME_FIELD = "name"
RECORD_DESCRIPTION_FIELD = "description"
RECORD_CORE_FIELDS = (RECORD_ID_FIELD, RECORD_NAME_FIELD, RECORD_DESCRIPTION_FIELD)
RECORD_ID_SUFFIX_LENGTH = 8
LIST_SEPARATOR_WIDTH = 20
