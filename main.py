import os
import sys

import yaml
from dotenv import load_dotenv
from rich.console import Console

from mud.bootstrap import DEFAULT_WORLD, WorldDataError, build_world, load_world_file
from mud.config import CONFIG_PATH, load_config
from mud.controller import MUDController
from mud.game_io import GameIO, custom_theme


def load_world(config, io):
    """
    Builds the world named by the config. Returns (rooms, player), or None
    after reporting why the world file could not be used.
    """
    world_file = config.get("world_file")
    if not world_file:
        return build_world(DEFAULT_WORLD)

    try:
        return build_world(load_world_file(world_file))
    except FileNotFoundError as e:
        io.warn("ERROR: World file not found.", f"Missing file: {e}")
        return None
    except yaml.YAMLError as e:
        io.warn("YAML STRUCTURE ERROR:", f"Check your world file for indentation or syntax errors.\nDetails: {e}")
        return None
    except WorldDataError as e:
        io.warn("WORLD DEFINITION ERROR:", e)
        return None


# ============================================
# MAIN
# ============================================
def main():
    load_dotenv()

    console = Console(theme=custom_theme)
    config_path = os.getenv("MUD_CONFIG", CONFIG_PATH)
    try:
        config = load_config(config_path)
    except (OSError, yaml.YAMLError) as e:
        GameIO(console=console).warn("CONFIG ERROR:", f"Could not read {config_path}.\nDetails: {e}")
        return 1

    io = GameIO(console=console, debug=config.get("debug_mode", False))
    world = load_world(config, io)
    if world is None:
        return 1

    rooms, player = world
    io.debug("World", [
        ("Rooms", ", ".join(rooms)),
        ("Player", player.name),
        ("Start", player.current_room.name),
    ])

    MUDController(player, io).run_game_loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
