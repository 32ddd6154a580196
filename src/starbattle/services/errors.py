"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class SaveLoadError(Exception):
    """Raised when save or load operations fail."""


class CharacterNotFoundError(SaveLoadError):
    """Raised when a character id is not present in the repository."""
