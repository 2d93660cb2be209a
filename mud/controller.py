import enum

from mud.game_io import GameIO

WELCOME = "Welcome to the game! Type 'help' for commands."

HELP_TEXT = (
    "Available commands:",
    "look - Describe the current room.",
    "move <direction> - Move in a direction (forward, back, left, right).",
    "pick up <item> - Pick up an item.",
    "inventory - Show items in your inventory.",
    "help - Show this help menu.",
    "quit / exit - End the game.",
)


class GameState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


def parse_command(line):
    """Splits a raw input line into a lower-cased (command, argument) pair."""
    parts = line.strip().lower().split(None, 1)
    if not parts:
        return "", ""
    command = parts[0]
    argument = parts[1] if len(parts) > 1 else ""
    return command, argument


class MUDController:
    def __init__(self, player, io=None):
        self.player = player
        self.io = io or GameIO()
        self.actions = {
            "look": self.look_around,
            "move": self.move,
            "pick": self.pick,
            "inventory": self.check_inventory,
            "help": self.show_help,
            "quit": self.quit,
            "exit": self.quit,
        }

    def run_game_loop(self):
        self.io.write(WELCOME)
        state = GameState.RUNNING
        while state is GameState.RUNNING:
            try:
                line = self.io.read_line()
            except KeyboardInterrupt:
                line = None
            if line is None:
                # Out of input: same as typing quit.
                self.io.write("")
                line = "quit"
            state = self.handle_input(line)
        return state

    def handle_input(self, line):
        command, argument = parse_command(line)
        action = self.actions.get(command, self.unknown)
        state = action(argument) or GameState.RUNNING
        self.io.debug("Dispatch", [
            ("Command", command),
            ("Argument", argument),
            ("Room", self.player.current_room.name),
            ("State", state.value),
        ])
        return state

    # --- ACTIONS ---
    def look_around(self, argument=""):
        room = self.player.current_room
        self.io.write(f"Room: {room.name}")
        self.io.write(room.description)
        self.io.write(f"Items here: {room.list_items()}")

    def move(self, direction):
        result = self.player.move(direction)
        if result.found:
            self.io.write(f"You moved to: {result.value.name}")
            self.look_around()
        else:
            self.io.write("You can't go that way!")

    def pick(self, argument):
        if argument.startswith("up "):
            self.pick_up(argument[len("up "):])
        else:
            self.io.write("Invalid command! Use 'pick up <item>'.")

    def pick_up(self, item_name):
        result = self.player.pick_up(item_name)
        if result.found:
            self.io.write(f"You picked up {item_name}.")
        else:
            self.io.write(f"No item named {item_name} here!")

    def check_inventory(self, argument=""):
        inventory = self.player.inventory
        if not inventory:
            self.io.write("Your inventory is empty.")
            return
        self.io.write("You are carrying:")
        for item in inventory:
            self.io.write(f"- {item.name}")

    def show_help(self, argument=""):
        for line in HELP_TEXT:
            self.io.write(line)

    def quit(self, argument=""):
        self.io.write("Goodbye!")
        return GameState.STOPPED

    def unknown(self, argument=""):
        self.io.write("Unknown command! Type 'help' for a list of commands.")
