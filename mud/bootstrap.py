"""
World bootstrap.

A world is plain data (the same shape a YAML world file loads into):

    player: Warrior
    start_room: Cave Entrance
    rooms:
      - name: Cave Entrance
        description: ...
        exits: {forward: Dark Tunnel}
        items:
          - {name: axe, description: ...}

`build_world` validates the data and turns it into linked Room objects plus
the Player standing in the start room.
"""
import yaml

from mud.world import Item, Player, Room

DEFAULT_WORLD = {
    "player": "Warrior",
    "start_room": "Cave Entrance",
    "rooms": [
        {
            "name": "Cave Entrance",
            "description": "A gloomy entrance to an underground cave.",
            "exits": {"forward": "Dark Tunnel"},
            "items": [
                {"name": "axe", "description": "A heavy battle axe with a sharp edge."},
            ],
        },
        {
            "name": "Dark Tunnel",
            "description": "A narrow tunnel with eerie echoes.",
            "exits": {"back": "Cave Entrance"},
            "items": [
                {"name": "helmet", "description": "A reinforced iron helmet, slightly dented."},
            ],
        },
    ],
}


class WorldDataError(Exception):
    pass


def load_world_file(path):
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise WorldDataError(f"world file {path} does not define a mapping")
    return data


def _require_text(value, what, optional=False):
    if value is None and optional:
        return
    if not isinstance(value, str) or not value.strip():
        raise WorldDataError(f"{what} must be a non-empty string, got {value!r}")


def _require_mapping(value, what):
    if not isinstance(value, dict):
        raise WorldDataError(f"{what} must be a mapping, got {value!r}")


def _require_list(value, what):
    if not isinstance(value, list):
        raise WorldDataError(f"{what} must be a list, got {value!r}")


def validate(data):
    _require_mapping(data, "world")
    rooms = data.get("rooms") or []
    _require_list(rooms, "rooms")
    if not rooms:
        raise WorldDataError("world defines no rooms")
    _require_text(data.get("player"), "player name", optional=True)

    names = set()
    for room in rooms:
        _require_mapping(room, "room entry")
        name = room.get("name")
        _require_text(name, "room name")
        if name in names:
            raise WorldDataError(f"room {name!r} defined twice")
        names.add(name)

    for room in rooms:
        name = room["name"]
        if not isinstance(room.get("description") or "", str):
            raise WorldDataError(f"description of room {name!r} must be a string")

        items = room.get("items") or []
        _require_list(items, f"items of room {name!r}")
        for item in items:
            _require_mapping(item, f"item in room {name!r}")
            _require_text(item.get("name"), f"item name in room {name!r}")
            if not isinstance(item.get("description") or "", str):
                raise WorldDataError(f"description of item {item['name']!r} must be a string")

        exits = room.get("exits") or {}
        _require_mapping(exits, f"exits of room {name!r}")
        for direction, target in exits.items():
            _require_text(direction, f"exit direction in room {name!r}")
            if not isinstance(target, str) or target not in names:
                raise WorldDataError(
                    f"exit {direction!r} of room {name!r} leads to unknown room {target!r}")

    start = data.get("start_room")
    if not isinstance(start, str) or start not in names:
        raise WorldDataError(f"start room {start!r} not defined")
    return True


def build_world(data=None):
    """
    Builds the rooms and the player from a world definition.
    Returns (rooms_by_name, player).
    """
    if data is None:
        data = DEFAULT_WORLD
    validate(data)

    rooms = {}
    for room_data in data["rooms"]:
        room = Room(room_data["name"], room_data.get("description") or "")
        for item_data in room_data.get("items") or []:
            room.add_item(Item(item_data["name"], item_data.get("description") or ""))
        rooms[room.name] = room

    # Exits are wired once every room exists.
    for room_data in data["rooms"]:
        room = rooms[room_data["name"]]
        for direction, target in (room_data.get("exits") or {}).items():
            room.add_connection(direction, rooms[target])

    player = Player(data.get("player") or "Warrior", rooms[data["start_room"]])
    return rooms, player
