import os

from adventure.items import Key, Coin

DEFAULT_SAVE_PATH = "save_game.txt"
KEY_CODE_PREFIX = "Key Code: "
COIN_PREFIX = "Coin "
MAX_COIN_AMOUNT = 2**32 - 1


class SaveRecord:
    """
    The contents of a save file: the key code from the first line and the
    inventory from the rest.
    """
    def __init__(self, key_code, inventory):
        self.key_code = key_code
        self.inventory = inventory

    def __repr__(self):
        return f"SaveRecord(key_code={self.key_code!r}, inventory={self.inventory!r})"


def generate_key_code(rng):
    return f"{rng.randint(0, 999999):06d}"


def save_game(inventory, key_code, filename=DEFAULT_SAVE_PATH):
    """
    Overwrites the save file. I/O errors propagate to the caller.
    """
    with open(filename, "w", encoding="utf-8") as f:
        f.write(f"{KEY_CODE_PREFIX}{key_code}\n")
        for item in inventory:
            f.write(_format_item(item) + "\n")


def load_record(filename=DEFAULT_SAVE_PATH):
    """
    Reads the save file. A missing file is a new game: empty key code and
    empty inventory.
    """
    if not os.path.exists(filename):
        return SaveRecord("", [])

    with open(filename, "r", encoding="utf-8", newline="") as f:
        lines = split_lines(f.read())

    if not lines:
        return SaveRecord("", [])

    key_line = lines[0]
    key_code = key_line[len(KEY_CODE_PREFIX):] if key_line.startswith(KEY_CODE_PREFIX) else key_line
    return SaveRecord(key_code, [parse_item(line) for line in lines[1:]])


def load_game(filename=DEFAULT_SAVE_PATH):
    return load_record(filename).inventory


def split_lines(text):
    """
    Splits on '\\n' only, dropping one '\\r' before each newline.
    A final newline does not start another line.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def parse_item(line):
    """
    'Key' -> Key, 'Coin <n>' -> Coin(n) for n an unsigned 32-bit amount
    with an optional leading '+'. Anything else degrades to Coin(0).
    """
    if line == "Key":
        return Key()
    if line.startswith(COIN_PREFIX):
        amount = line[len(COIN_PREFIX):]
        digits = amount[1:] if amount.startswith("+") else amount
        if digits.isascii() and digits.isdigit() and int(digits) <= MAX_COIN_AMOUNT:
            return Coin(int(digits))
    return Coin(0)


def _format_item(item):
    if isinstance(item, Key):
        return "Key"
    if isinstance(item, Coin):
        return f"{COIN_PREFIX}{item.amount}"
    raise TypeError(f"Cannot save item of type {type(item).__name__}")
