"""Combat-rule exceptions raised by combatants and recovered by the battle service."""


class CombatError(Exception):
    """Base exception for rejected combat actions."""


class InsufficientResource(CombatError):
    """Raised when an action is attempted without enough energy."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Requires {required} energy but only {available} is available.")
        self.required = required
        self.available = available


class ItemNotFound(CombatError):
    """Raised when an inventory index does not point at an item."""

    def __init__(self, index: int, inventory_size: int) -> None:
        super().__init__(f"No item at index {index} (inventory holds {inventory_size}).")
        self.index = index
        self.inventory_size = inventory_size


class UnknownAction(CombatError):
    """Raised when a selector returns an action id the engine does not recognise."""

    def __init__(self, action_id: str) -> None:
        super().__init__(f"Unknown action '{action_id}'.")
        self.action_id = action_id
