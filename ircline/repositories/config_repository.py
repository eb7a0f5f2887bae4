from __future__ import annotations

import json
import logging
import os

from pydantic import ValidationError

from ircline.constants import CONFIG_FILE
from ircline.models import AppConfig

logger = logging.getLogger(__name__)


class ConfigRepository:
    def __init__(self, path: str = CONFIG_FILE):
        self.path = path

    def load_config(self) -> AppConfig:
        if not os.path.exists(self.path):
            return AppConfig()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Failed to load config from %s: %s", self.path, exc)
            return AppConfig()
        if not isinstance(data, dict):
            logger.warning("Ignoring config in %s: expected a JSON object", self.path)
            return AppConfig()
        try:
            return AppConfig.model_validate(data)
        except ValidationError as exc:
            logger.warning("Invalid config in %s: %s", self.path, exc)
            return AppConfig()
