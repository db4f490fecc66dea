"""Distance de Levenshtein exacte, déléguée à python-Levenshtein."""
from typing import Sequence

import Levenshtein as lev


def fast_distance(a: Sequence, b: Sequence) -> int:
    """
    Calcule la distance de Levenshtein par égalité stricte des caractères.

    Utilise python-Levenshtein (implémentation C ultra-rapide), sans cache
    ni prise en compte de la locale.
    """
    return lev.distance(a, b)
