# config_manager.py
import os
import sys
from pathlib import Path
import json

from . import error as E

# Settings live next to the package unless BRACKET_CALCULATOR_CONFIG points elsewhere
PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULTS = {
    "darkmode": False,
    "decimal_places": 10,
    "show_equation": False,
    "debug": False
}


def config_dir():
    override = os.environ.get("BRACKET_CALCULATOR_CONFIG")
    if override:
        return Path(override)
    return PACKAGE_DIR


def config_json():
    return config_dir() / "config.json"


def ui_strings():
    return config_dir() / "ui_strings.json"


def load_setting_value(key_value):
    try:
        with open(config_json(), 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}

    # Valid JSON that is not an object is as unusable as a corrupt file
    if not isinstance(settings_dict, dict):
        settings_dict = {}

    # Keys missing from the file keep their default value
    settings_dict = {**DEFAULTS, **settings_dict}

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    try:
        with open(ui_strings(), 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = None

    if not isinstance(settings_dict, dict):
        settings_dict = {key: key.replace("_", " ").capitalize() for key in DEFAULTS}


    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, "")




def save_setting(settings_dict):
    try:
        with open (config_json(), 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError) as e:
        print(f"Error 5001: {E.ERROR_MESSAGES['5001']} ({e})", file=sys.stderr)
        return{}





if __name__ == "__main__":
    print(load_setting_value("all"))
    print(load_setting_description("all"))
