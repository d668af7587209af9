"""
Optional YAML settings shared by the scripts.

A config file is a flat mapping, for example:

    output: output.md
    jpeg_quality: 90
    log_dir: logs
    log_file: false

Command-line flags win over the file, and the file wins over DEFAULTS.
"""

import yaml

DEFAULTS = {
    "output": "output.md",
    "jpeg_quality": None,
    "log_dir": None,
    "log_file": True,
}

# Pillow documents quality values above 95 as something to avoid.
MIN_QUALITY = 1
MAX_QUALITY = 95


class ConfigError(ValueError):
    pass


def validate_quality(value):
    """
    Returns value if it is None or an int in [MIN_QUALITY, MAX_QUALITY].
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"jpeg_quality must be an integer, got {value!r}")
    if not MIN_QUALITY <= value <= MAX_QUALITY:
        raise ConfigError(f"jpeg_quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {value}")
    return value


def validate_types(settings, path):
    """
    Checks the non-numeric settings. output must be a string, log_dir a
    string or None, and log_file a boolean.
    """
    if not isinstance(settings["output"], str) or not settings["output"]:
        raise ConfigError(f"output in {path} must be a file path, got {settings['output']!r}")
    if settings["log_dir"] is not None and not isinstance(settings["log_dir"], str):
        raise ConfigError(f"log_dir in {path} must be a directory path, got {settings['log_dir']!r}")
    if not isinstance(settings["log_file"], bool):
        raise ConfigError(f"log_file in {path} must be true or false, got {settings['log_file']!r}")


def load_config(path=None):
    """
    Reads settings from a YAML file and merges them over DEFAULTS.
    With no path, returns a copy of DEFAULTS.
    """
    settings = dict(DEFAULTS)
    if path is None:
        return settings

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse error in {path}: {e}") from e

    # An empty file parses to None.
    if data is None:
        return settings
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(map(str, unknown))}")

    settings.update(data)
    validate_types(settings, path)
    settings["jpeg_quality"] = validate_quality(settings["jpeg_quality"])
    return settings


def resolve(cli_value, settings, key):
    """
    Picks the command-line value when one was given, otherwise the setting.
    """
    return cli_value if cli_value is not None else settings[key]
