import os

import yaml

CONFIG_PATH = "config.yaml"

DEFAULTS = {
    "debug_mode": False,
    "world_file": None,
}

DEFAULT_YAML = """
# CAVE MUD CONFIGURATION
# ----------------------
# debug_mode prints a trace panel (on stderr) for every command.
# world_file points at a YAML world definition; leave empty for the built-in cave.

debug_mode: false
world_file:
"""

TRUTHY = ("1", "true", "yes", "on")


def load_config(config_path=CONFIG_PATH):
    """
    Loads config.yaml or creates default if missing.
    """
    if not os.path.exists(config_path):
        with open(config_path, "w") as f:
            f.write(DEFAULT_YAML.strip() + "\n")

    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise yaml.YAMLError(f"{config_path} must hold a mapping of settings")

    config = dict(DEFAULTS)
    config.update(loaded)

    # Environment wins over the file
    if os.getenv("MUD_DEBUG", "").strip().lower() in TRUTHY:
        config["debug_mode"] = True
    return config
