"""Exceptions du moteur de distance."""


class LevenpyError(Exception):
    """Erreur de base de levenpy."""


class CapabilityUnavailable(LevenpyError):
    """Le comparateur locale-aware ne peut pas être construit."""


class InvalidInputError(LevenpyError, TypeError):
    """Une des entrées de `distance` n'est pas une chaîne."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(
            f"'{name}' doit être une chaîne (str), reçu {type(value).__name__}"
        )
