"""Distance de Levenshtein en programmation dynamique sur deux lignes.

Basé sur l'algorithme décrit sur http://en.wikipedia.org/wiki/Levenshtein_distance.
"""
from typing import Callable, Optional, Sequence

Equivalence = Callable[[str, str], bool]


def compute_distance(
    a: Sequence[str], b: Sequence[str], equivalent: Optional[Equivalence] = None
) -> int:
    """
    Calcule la distance d'édition entre deux séquences.

    Args:
        a: Première séquence
        b: Deuxième séquence
        equivalent: Prédicat d'équivalence de deux caractères (égalité stricte si None)

    Returns:
        Distance d'édition (0 <= d <= max(len(a), len(b)))
    """
    len_a = len(a)
    len_b = len(b)

    # Cas de base
    if len_a == 0:
        return len_b
    if len_b == 0:
        return len_a

    prev_row = list(range(len_b + 1))
    next_col = 0

    for i in range(len_a):
        next_col = i + 1
        char_a = a[i]

        for j in range(len_b):
            cur_col = next_col

            # substitution : égalité stricte d'abord, prédicat ensuite
            char_b = b[j]
            if char_a == char_b or (equivalent is not None and equivalent(char_a, char_b)):
                next_col = prev_row[j]
            else:
                next_col = prev_row[j] + 1

            # insertion
            tmp = cur_col + 1
            if next_col > tmp:
                next_col = tmp
            # suppression
            tmp = prev_row[j + 1] + 1
            if next_col > tmp:
                next_col = tmp

            prev_row[j] = cur_col

        prev_row[len_b] = next_col

    return next_col
