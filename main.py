import sys
import os
import yaml
from dotenv import load_dotenv

# Import Engine Components
from adventure.director import Director
from adventure.items import Coin
from adventure.listener import Listener
from adventure.narrator import Narrator, make_console
from adventure.save_file import DEFAULT_SAVE_PATH, load_record
from adventure.states import GameState, parse_state

# --- CONFIGURATION ---
DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_CONFIG = {
    "save_file": DEFAULT_SAVE_PATH,
    "starting_state": GameState.START.value,
    "debug_mode": False,
}

load_dotenv()
console = make_console()


def load_config(config_path=None):
    """
    Loads config.yaml or creates default if missing.
    Missing keys fall back to DEFAULT_CONFIG.
    """
    config_path = config_path or os.getenv("ADVENTURE_CONFIG", DEFAULT_CONFIG_PATH)
    if not os.path.exists(config_path):
        default_yaml = """
# TEXT ADVENTURE CONFIGURATION
# ----------------------------
# save_file: where 'yes' at the end of a game writes your inventory.
# starting_state: start, room1, room2, room3, purchase, win or game_over.
#   Set it to 'purchase' to open in the item shop.

save_file: save_game.txt
starting_state: start
debug_mode: false
"""
        with open(config_path, "w") as f:
            f.write(default_yaml.strip() + "\n")

    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"{config_path} must contain a mapping, got {type(loaded).__name__}")

    config = dict(DEFAULT_CONFIG)
    config.update(loaded)

    if not isinstance(config["save_file"], str) or not config["save_file"].strip():
        raise ValueError(f"save_file must be a file name, got {config['save_file']!r}")
    if not isinstance(config["debug_mode"], bool):
        raise ValueError(f"debug_mode must be true or false, got {config['debug_mode']!r}")
    return config


def load_inventory(narrator, save_path):
    """
    A missing or empty save starts a new game with an empty purse.
    An unreadable one does too, with a warning.
    """
    try:
        record = load_record(save_path)
    except (OSError, UnicodeDecodeError) as e:
        narrator.announce("errors.save_unreadable", style="warning", path=save_path, details=e)
        return [Coin(0)]

    narrator.debug("Loaded Save", {"key_code": record.key_code, "inventory": [repr(i) for i in record.inventory]})
    return record.inventory or [Coin(0)]


# ============================================
# MAIN
# ============================================
def main():
    narrator = Narrator(console=console)
    config_path = os.getenv("ADVENTURE_CONFIG", DEFAULT_CONFIG_PATH)

    try:
        config = load_config(config_path)
        starting_state = parse_state(config["starting_state"])
    except (yaml.YAMLError, ValueError, OSError) as e:
        narrator.announce("errors.config", style="warning", path=config_path, details=e)
        sys.exit(1)

    narrator.debug_mode = config["debug_mode"]
    save_path = config["save_file"]

    inventory = load_inventory(narrator, save_path)
    director = Director(inventory, Listener(console=console), narrator, save_path=save_path)

    try:
        director.run(starting_state)
    except KeyboardInterrupt:
        console.print()
        narrator.narrate("errors.goodbye")
    except EOFError:
        narrator.announce("errors.input_closed", style="warning")
        sys.exit(1)
    except OSError as e:
        narrator.announce("errors.save_failed", style="warning", path=save_path, details=e)
        sys.exit(1)


if __name__ == "__main__":
    main()
