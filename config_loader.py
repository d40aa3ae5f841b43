# config_loader.py
import copy
import json
import os

from asciiart.palette import parse_color
from logger import debug
from utils import config_home

CONFIG_NAME = "config.json"

DEFAULT_CONFIG = {
    "display": {
        "show_ascii": True,
        "show_colors": True,
        "small_ascii": False,
        "ascii_distro": None,
    },
    "colors": {
        "primary": "auto",
        "secondary": "white",
    },
    "info": {
        "system": True,
        "hardware": True,
        "desktop": True,
        "network": True,
        "power": True,
        "audio": True,
        "packages": True,
        "misc": True,
        "public_ip": False,
    },
}


class ConfigError(Exception):
    pass


def get_config_path():
    return os.path.join(config_home(), "hyperfetch", CONFIG_NAME)


def merge_config(data):
    """Overlay a user config on the defaults; unknown sections and keys are kept."""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(data, dict):
        return merged
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def load_config(path=None):
    """
    Load the JSON config. Without an explicit path a missing or broken default
    file just means defaults; an explicit path that cannot be used raises ConfigError.
    """
    explicit = path is not None
    path = path or get_config_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        if explicit:
            raise ConfigError(f"Failed to read config: {path} not found")
        return merge_config({})
    except (OSError, ValueError) as e:
        if explicit:
            raise ConfigError(f"Failed to parse config {path}: {e}")
        debug(f"ignoring unreadable config {path}: {e}")
        return merge_config({})
    return merge_config(data)


def save_config(data, path=None):
    path = path or get_config_path()
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            return True
    except OSError:
        return False


def primary_color(config, art):
    """Accent colour for labels: the logo's own colour for "auto"/"distro"."""
    name = str(config.get("colors", {}).get("primary") or "auto").lower()
    if name in ("auto", "distro"):
        return art.primary_color
    return parse_color(name)
