from enum import Enum


class GameState(Enum):
    START = "start"
    ROOM1 = "room1"
    ROOM2 = "room2"
    ROOM3 = "room3"
    WIN = "win"
    GAME_OVER = "game_over"
    PURCHASE = "purchase"

    @property
    def is_terminal(self):
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset({GameState.WIN, GameState.GAME_OVER})
ROOM_STATES = (GameState.ROOM1, GameState.ROOM2, GameState.ROOM3)


def parse_state(name):
    """
    Looks up a state by its config name ('start', 'purchase', ...).
    Raises ValueError listing the valid names.
    """
    try:
        return GameState(str(name).strip().lower())
    except ValueError:
        valid = ", ".join(state.value for state in GameState)
        raise ValueError(f"Unknown game state '{name}'. Expected one of: {valid}") from None


def random_room(rng):
    # Uniform over all three rooms; the room just visited is not excluded.
    return rng.choice(ROOM_STATES)
