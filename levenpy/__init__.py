"""levenpy - distance de Levenshtein avec comparaison sensible à la locale."""
from levenpy.engine import DistanceEngine, default_engine, distance
from levenpy.exceptions import CapabilityUnavailable, InvalidInputError, LevenpyError
from levenpy.models import DistanceOptions

__all__ = [
    "DistanceEngine",
    "DistanceOptions",
    "CapabilityUnavailable",
    "InvalidInputError",
    "LevenpyError",
    "default_engine",
    "distance",
]
