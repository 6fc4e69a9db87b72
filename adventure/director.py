import random

from adventure.items import Key, Coin, coin_total, has_key, collapse_coins
from adventure.save_file import DEFAULT_SAVE_PATH, save_game, generate_key_code
from adventure.states import GameState, random_room

KEY_PRICE = 3
KEY_RESET_COINS = 3
LOOPHOLE_PRICE = 5


class Director:
    def __init__(self, inventory, listener, narrator, save_path=DEFAULT_SAVE_PATH, rng=None):
        """
        The Director is the STATE MACHINE.
        It owns the inventory, reads answers through the Listener and
        reports what happened through the Narrator. It never formats text.
        """
        self.inventory = inventory
        self.listener = listener
        self.narrator = narrator
        self.save_path = save_path
        self.rng = rng or random.Random()
        self.history = []
        self.key_code = None

        self.handlers = {
            GameState.START: self.start,
            GameState.ROOM1: self.room1,
            GameState.ROOM2: self.room2,
            GameState.ROOM3: self.room3,
            GameState.PURCHASE: self.purchase,
            GameState.WIN: self.win,
            GameState.GAME_OVER: self.game_over,
        }

    # ==========================================================
    # 1. THE LOOP
    # ==========================================================
    def run(self, state=GameState.START):
        """
        Steps until a terminal state has run its save prompt.
        Returns the terminal state the run ended in.
        """
        while True:
            next_state = self.step(state)
            if state.is_terminal:
                return state
            self._record_transition(state, next_state)
            state = next_state

    def step(self, state):
        """
        Runs one visit to `state`. Returns the next state, or None once a
        terminal state has finished.
        """
        return self.handlers[state]()

    # ==========================================================
    # 2. THE ROOMS
    # ==========================================================
    def start(self):
        self.narrator.announce("start.welcome", style="info", title=self.narrator.text("title"))
        self.narrator.narrate("start.intro")
        self.narrator.narrate("start.coins", coins=coin_total(self.inventory))
        self.narrator.narrate("start.choose_door")

        # The door number is cosmetic; every door leads somewhere random.
        if self.listener.read() in ("1", "2", "3"):
            return random_room(self.rng)

        self.narrator.narrate("start.invalid")
        return GameState.GAME_OVER

    def room1(self):
        self.narrator.narrate("room1.enter")
        self.narrator.narrate("room1.need_key")

        if has_key(self.inventory):
            self.narrator.narrate("room1.unlock")
            return GameState.WIN

        self.narrator.narrate("room1.search")
        return random_room(self.rng)

    def room2(self):
        self.narrator.narrate("room2.enter")
        self.narrator.narrate("room2.offer")

        answer = self.listener.read()
        if answer == "yes":
            self.narrator.narrate("room2.take")
            self.inventory.append(Key())
            self.inventory.append(Coin(1))
            return random_room(self.rng)
        if answer == "no":
            self.narrator.narrate("room2.leave")
            return random_room(self.rng)

        self.narrator.narrate("room2.invalid")
        return GameState.GAME_OVER

    def room3(self):
        self.narrator.narrate("room3.enter")
        self.narrator.narrate("room3.blocked")
        return random_room(self.rng)

    # ==========================================================
    # 3. THE SHOP
    # ==========================================================
    def purchase(self):
        """
        Every visit ends in a random room, except a successful loophole
        which wins on the spot.
        """
        coins = coin_total(self.inventory)

        self.narrator.narrate("purchase.welcome")
        if coins > 0:
            self.narrator.narrate("purchase.coins", coins=coins)
        else:
            self.narrator.narrate("purchase.no_coins")
        if coins >= LOOPHOLE_PRICE:
            self.narrator.narrate("purchase.loophole_offer")
        self.narrator.narrate("purchase.menu")

        choice = self.listener.read()
        if choice == "1":
            if coins >= KEY_PRICE:
                self.narrator.narrate("purchase.key_bought")
                self.inventory.append(Key())
                # Whatever was held, the purse is reset to a single stack of 3.
                collapse_coins(self.inventory, KEY_RESET_COINS)
            else:
                self.narrator.narrate("purchase.key_too_poor")
        elif choice == "L":
            if coins >= LOOPHOLE_PRICE:
                self.narrator.narrate("purchase.loophole_bought")
                return GameState.WIN
            self.narrator.narrate("purchase.loophole_too_poor")
        elif choice != "2":
            self.narrator.narrate("purchase.invalid")

        return random_room(self.rng)

    # ==========================================================
    # 4. THE ENDINGS
    # ==========================================================
    def win(self):
        self.narrator.announce("win.banner", style="success")
        self.offer_save()
        return None

    def game_over(self):
        self.narrator.announce("game_over.banner", style="warning")
        self.offer_save()
        return None

    def offer_save(self):
        self.narrator.narrate("save.prompt")

        answer = self.listener.read()
        if answer == "yes":
            self.key_code = generate_key_code(self.rng)
            save_game(self.inventory, self.key_code, self.save_path)
            self.narrator.narrate("save.saved", key_code=self.key_code)
        elif answer == "no":
            self.narrator.narrate("save.declined")
        else:
            self.narrator.narrate("save.invalid")

    # ==========================================================
    # 5. INTERNAL HELPERS
    # ==========================================================
    def _record_transition(self, from_state, to_state):
        event = {
            "event_type": "transition",
            "from": from_state.value,
            "to": to_state.value,
            "inventory": [repr(item) for item in self.inventory],
            "coins": coin_total(self.inventory),
        }
        self.history.append(event)
        self.narrator.debug("Transition", event)
