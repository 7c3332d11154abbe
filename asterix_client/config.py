"""Client configuration (API location, timeouts, labels).

get_config() returns the defaults merged with, in order of precedence:
  1. environment variables (a .env file is loaded first)
  2. an optional JSON config file

asterix_client.pages.create_pages() feeds it to AsterixClient.from_config()
and Session.from_config().
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

_CONFIG_DEFAULTS: dict[str, Any] = {
    "api_url": "http://localhost:13013",
    "api_prefix": "/api/asterix",
    "timeout": 10.0,
    "no_village_label": "no village",
}

_ENV_VARS = {
    "api_url": "ASTERIX_API_URL",
    "api_prefix": "ASTERIX_API_PREFIX",
    "timeout": "ASTERIX_TIMEOUT",
    "no_village_label": "ASTERIX_NO_VILLAGE_LABEL",
}


def get_config(config_file: Path | None = None) -> dict[str, Any]:
    """Read config, returning defaults merged with stored values and env vars."""
    load_dotenv()
    config = dict(_CONFIG_DEFAULTS)
    if config_file is not None and config_file.is_file():
        stored = json.loads(config_file.read_text())
        for key in _CONFIG_DEFAULTS:
            if key in stored:
                config[key] = stored[key]
    for key, var in _ENV_VARS.items():
        value = os.getenv(var)
        if value:
            config[key] = value
    config["timeout"] = float(config["timeout"])
    return config
