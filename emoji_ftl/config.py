import json
import sys
from pathlib import Path

# --- Configuration Section ---
CONFIG_FILE_NAME = 'emoji_ftl_config.json'

OUTPUT_FORMATS = ("ftl", "json")

# Hardcoded defaults. These are used if the config file is missing or incomplete.
INTERNAL_DEFAULTS = {
    "format": "ftl",
    "ftl_filename": "cosmic_applet_emoji_selector.ftl",
    "json_filename": "annotations.json",
}


def load_and_merge_config(config_path=None):
    """
    Loads output settings with a clear priority: an explicit config file,
    then emoji_ftl_config.json in the working directory, then the internal
    defaults.
    """
    effective_defaults = INTERNAL_DEFAULTS.copy()
    config_file = Path(config_path) if config_path else Path.cwd() / CONFIG_FILE_NAME

    if not config_file.exists():
        if config_path:
            print(f"Warning: Config file '{config_file}' not found. Using internal defaults.", file=sys.stderr)
        return effective_defaults

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            user_config = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError):
        print(f"Warning: Could not parse '{config_file}'. Using internal defaults.", file=sys.stderr)
        return effective_defaults
    except OSError as e:
        print(f"Warning: Error reading '{config_file}'. Using internal defaults. Error: {e}", file=sys.stderr)
        return effective_defaults

    if not isinstance(user_config, dict):
        print(f"Warning: '{config_file}' does not contain an object. Using internal defaults.", file=sys.stderr)
        return effective_defaults

    for key, value in user_config.items():
        if key not in INTERNAL_DEFAULTS:
            print(f"Warning: Ignoring unknown config key '{key}' in '{config_file}'.", file=sys.stderr)
        elif key == "format" and value not in OUTPUT_FORMATS:
            print(f"Warning: Ignoring unsupported format '{value}' in '{config_file}'.", file=sys.stderr)
        elif not isinstance(value, str) or not value:
            print(f"Warning: Ignoring empty or non-string '{key}' in '{config_file}'.", file=sys.stderr)
        else:
            effective_defaults[key] = value

    print(f"INFO: Loaded custom defaults from '{config_file}'")
    return effective_defaults


def build_run_config(primary_pattern, derived_pattern, output_dir, defaults=None, output_format=None, verbose=False):
    """Assembles the settings for a single run."""
    settings = INTERNAL_DEFAULTS.copy()
    settings.update(defaults or {})
    if output_format:
        settings["format"] = output_format
    return {
        "primary_pattern": primary_pattern,
        "derived_pattern": derived_pattern,
        "output_dir": Path(output_dir),
        "format": settings["format"],
        "ftl_filename": settings["ftl_filename"],
        "json_filename": settings["json_filename"],
        "verbose": verbose,
    }
