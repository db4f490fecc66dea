"""Point d'entrée du calcul de distance de Levenshtein."""
import threading
from typing import Any, Mapping, NamedTuple, Optional, Union

from levenpy.cache import ResultCache
from levenpy.config import settings
from levenpy.exceptions import InvalidInputError
from levenpy.logger import logger
from levenpy.models import DistanceOptions
from levenpy.scoring.collator import LocaleComparator, create_comparator
from levenpy.scoring.distance import fast_distance
from levenpy.scoring.matrix import compute_distance

OptionsLike = Union[DistanceOptions, Mapping[str, Any], None]


class DistanceResult(NamedTuple):
    """Distance accompagnée de la façon dont elle a été obtenue."""
    distance: int
    used_collator: bool
    cached: bool


class DistanceEngine:
    """
    Moteur de distance : sortie rapide, cache, collator ou chemin rapide.

    Chaque instance possède son comparateur et son cache ; deux moteurs ne
    partagent aucun état.
    """

    def __init__(
        self,
        comparator: Optional[LocaleComparator] = None,
        cache: Optional[ResultCache] = None,
        cache_max_size: Optional[int] = None,
        locale: Optional[str] = None,
    ):
        if comparator is None:
            comparator = create_comparator(
                locale or settings.COLLATOR_LOCALE,
                enabled=settings.COLLATOR_ENABLED,
            )
        self.comparator = comparator
        self.cache = cache if cache is not None else ResultCache(cache_max_size)

    @property
    def collator_available(self) -> bool:
        return bool(getattr(self.comparator, "available", False))

    @staticmethod
    def parse_options(options: OptionsLike) -> DistanceOptions:
        """Normalise les options (modèle, dict ou None)."""
        if options is None:
            return DistanceOptions()
        if isinstance(options, DistanceOptions):
            return options
        return DistanceOptions.model_validate(dict(options))

    def compute(self, a: str, b: str, options: OptionsLike = None) -> DistanceResult:
        """
        Calcule la distance et indique le chemin emprunté.

        Args:
            a: Première chaîne
            b: Deuxième chaîne
            options: {"useCollator": bool}

        Returns:
            DistanceResult(distance, used_collator, cached)
        """
        if not isinstance(a, str):
            raise InvalidInputError("a", a)
        if not isinstance(b, str):
            raise InvalidInputError("b", b)

        # Sortie rapide pour les chaînes identiques
        if a == b:
            return DistanceResult(0, False, False)

        opts = self.parse_options(options)
        if not (opts.use_collator and self.collator_available):
            return DistanceResult(fast_distance(a, b), False, False)

        key = (a, b)
        cached = self.cache.lookup(key)
        if cached is not None:
            return DistanceResult(cached, True, True)

        # Cas de base, non mis en cache
        if not a:
            return DistanceResult(len(b), True, False)
        if not b:
            return DistanceResult(len(a), True, False)

        dist = compute_distance(a, b, self.comparator.equivalent)
        self.cache.store(key, dist)
        return DistanceResult(dist, True, False)

    def get(self, a: str, b: str, options: OptionsLike = None) -> int:
        """
        Calcule la distance de Levenshtein entre deux chaînes.

        Returns:
            Distance de Levenshtein (0 et plus)
        """
        return self.compute(a, b, options).distance


_default_engine: Optional[DistanceEngine] = None
_default_lock = threading.Lock()


def default_engine() -> DistanceEngine:
    """Moteur partagé du processus, créé au premier appel."""
    global _default_engine  # pylint: disable=global-statement
    if _default_engine is None:
        with _default_lock:
            if _default_engine is None:
                _default_engine = DistanceEngine()
                logger.debug(
                    "Moteur par défaut créé (collator={available}).",
                    available=_default_engine.collator_available,
                )
    return _default_engine


def distance(a: str, b: str, options: OptionsLike = None) -> int:
    """
    Distance de Levenshtein entre `a` et `b` via le moteur par défaut.

    Les chaînes sont comparées point de code par point de code : un
    caractère hors du plan multilingue de base (ex: "😀") compte pour une
    seule unité, pas deux comme en UTF-16.
    """
    return default_engine().get(a, b, options)
