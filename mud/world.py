NO_EXIT = "no_exit"
NO_ITEM = "no_item"


class Lookup:
    """
    Result of a world lookup. Either carries the value that was found or the
    reason nothing was, so callers never have to interpret a bare None.
    """
    def __init__(self, value=None, reason=None):
        self.value = value
        self.reason = reason

    @classmethod
    def found_value(cls, value):
        return cls(value=value)

    @classmethod
    def missing(cls, reason):
        return cls(reason=reason)

    @property
    def found(self):
        return self.reason is None

    def __bool__(self):
        return self.found

    def __repr__(self):
        if self.found:
            return f"Lookup(found={self.value!r})"
        return f"Lookup(missing={self.reason!r})"


class Item:
    def __init__(self, name, description=""):
        self._name = name
        self._description = description

    @property
    def name(self):
        return self._name

    @property
    def description(self):
        return self._description

    def match_name(self, name):
        return self._name.lower() == name.lower()

    def __repr__(self):
        return f"Item({self._name!r})"


def find_item(name, items):
    """First item whose name matches `name` ignoring case, or None."""
    for item in items:
        if item.match_name(name):
            return item
    return None


class Room:
    def __init__(self, name, description=""):
        self.name = name
        self.description = description
        self.connections = {}
        self.items = []

    def add_connection(self, direction, room):
        self.connections[direction] = room

    def get_connection(self, direction):
        room = self.connections.get(direction)
        if room is None:
            return Lookup.missing(NO_EXIT)
        return Lookup.found_value(room)

    def add_item(self, item):
        self.items.append(item)

    def remove_item(self, item):
        # Identity, not equality: two items may share a name.
        for i, held in enumerate(self.items):
            if held is item:
                del self.items[i]
                return True
        return False

    def get_item(self, item_name):
        item = find_item(item_name, self.items)
        if item is None:
            return Lookup.missing(NO_ITEM)
        return Lookup.found_value(item)

    def list_items(self):
        if not self.items:
            return "No items."
        return ", ".join(item.name for item in self.items)

    def __repr__(self):
        return f"Room({self.name!r})"


class Player:
    def __init__(self, name, starting_room):
        self.name = name
        self.current_room = starting_room
        self.inventory = []

    def add_item(self, item):
        self.inventory.append(item)

    def move(self, direction):
        result = self.current_room.get_connection(direction)
        if result.found:
            self.current_room = result.value
        return result

    def pick_up(self, item_name):
        """
        Moves the named item from the current room into the inventory.
        Nothing changes when the room has no such item.
        """
        room = self.current_room
        result = room.get_item(item_name)
        if result.found:
            self.add_item(result.value)
            room.remove_item(result.value)
        return result
