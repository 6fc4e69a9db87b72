class Item:
    """
    Something the player carries. Items have no identity beyond their kind
    and payload, so two Coins of the same amount are equal.
    """
    kind = "item"

    def __eq__(self, other):
        return type(self) is type(other) and self._payload() == other._payload()

    def __hash__(self):
        return hash((self.kind, self._payload()))

    def _payload(self):
        return ()


class Key(Item):
    kind = "key"

    def __repr__(self):
        return "Key()"


class Coin(Item):
    kind = "coin"

    def __init__(self, amount=0):
        if amount < 0:
            raise ValueError(f"Coin amount must be non-negative, got {amount}")
        self.amount = amount

    def _payload(self):
        return (self.amount,)

    def __repr__(self):
        return f"Coin({self.amount})"


def coin_total(inventory):
    """Sum of every Coin stack in the inventory."""
    return sum(item.amount for item in inventory if isinstance(item, Coin))


def has_key(inventory):
    return any(isinstance(item, Key) for item in inventory)


def collapse_coins(inventory, amount):
    """Replace every Coin stack with a single stack of `amount`."""
    inventory[:] = [item for item in inventory if not isinstance(item, Coin)]
    inventory.append(Coin(amount))
