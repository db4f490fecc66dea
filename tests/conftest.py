# tests/conftest.py
import pytest

from levenpy.cache import ResultCache
from levenpy.engine import DistanceEngine
from levenpy.scoring.collator import BaseCollator, ExactComparator


class CountingComparator:
    """Collator instrumenté : compte les appels à `equivalent`."""

    def __init__(self, inner=None):
        self.inner = inner or BaseCollator("generic")
        self.available = self.inner.available
        self.locale = self.inner.locale
        self.calls = 0

    def equivalent(self, char_a, char_b):
        self.calls += 1
        return self.inner.equivalent(char_a, char_b)


@pytest.fixture
def collator():
    """Collator générique (sensibilité base)."""
    return BaseCollator("generic")


@pytest.fixture
def engine(collator):
    """Moteur isolé avec collator et cache de capacité par défaut."""
    return DistanceEngine(comparator=collator, cache=ResultCache(10_000))


@pytest.fixture
def exact_engine():
    """Moteur sans collator disponible."""
    return DistanceEngine(comparator=ExactComparator(), cache=ResultCache(10_000))


@pytest.fixture
def counting_comparator():
    return CountingComparator()


@pytest.fixture
def small_cache_engine(counting_comparator):
    """Moteur instrumenté avec un cache de 3 entrées."""
    return DistanceEngine(comparator=counting_comparator, cache=ResultCache(3))
