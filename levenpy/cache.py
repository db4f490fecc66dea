"""Cache borné des distances calculées avec le collator."""
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from levenpy.config import settings
from levenpy.logger import logger

CacheKey = Tuple[str, str]


@dataclass(frozen=True)
class CacheStats:
    """Photographie de l'état du cache."""
    size: int
    max_size: int
    hits: int
    misses: int


class ResultCache:
    """
    Mapping (a, b) -> distance de capacité fixe.

    Une fois la capacité atteinte, le cache n'accepte plus de nouvelles
    entrées et n'évince jamais les anciennes (ce n'est pas un LRU).
    La clé est ordonnée : (a, b) et (b, a) sont deux entrées distinctes.
    """

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = settings.CACHE_MAX_SIZE if max_size is None else max_size
        if self.max_size < 0:
            raise ValueError("max_size doit être positif ou nul")
        self._data: Dict[CacheKey, int] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._full_logged = False

    def lookup(self, key: CacheKey) -> Optional[int]:
        """Retourne la distance mémorisée, ou None."""
        with self._lock:
            value = self._data.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def store(self, key: CacheKey, value: int) -> bool:
        """
        Mémorise une distance si la capacité le permet.

        Returns:
            True si l'entrée a été retenue, False si le cache est plein
        """
        with self._lock:
            if key in self._data:
                return True
            if len(self._data) >= self.max_size:
                if not self._full_logged:
                    logger.info(
                        "Cache plein ({size} entrées) : les nouveaux résultats ne sont plus retenus.",
                        size=self.max_size,
                    )
                    self._full_logged = True
                return False
            self._data[key] = value
            return True

    @property
    def is_full(self) -> bool:
        with self._lock:
            return len(self._data) >= self.max_size

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._data),
                max_size=self.max_size,
                hits=self._hits,
                misses=self._misses,
            )

    def clear(self):
        """Vide le cache (maintenance et tests)."""
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0
            self._full_logged = False

    def __len__(self):
        with self._lock:
            return len(self._data)

    def __contains__(self, key):
        with self._lock:
            return key in self._data
