"""Modèles Pydantic pour les options, requêtes et réponses."""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DistanceOptions(BaseModel): # pylint: disable=too-few-public-methods
    """Options d'un calcul de distance."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Comparaison sensible à la locale (casse et accents ignorés)
    use_collator: bool = Field(default=False, alias="useCollator")

    @field_validator("use_collator", mode="before")
    @classmethod
    def coerce_use_collator(cls, value):
        """Toute valeur est acceptée et lue comme un booléen (None = non demandé)."""
        return bool(value)


class DistanceRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête de distance."""
    a: str
    b: str
    options: DistanceOptions = Field(default_factory=DistanceOptions)


class DistanceResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Réponse de distance."""
    distance: int
    used_collator: bool
    cached: bool = False


class CacheStatsResponse(BaseModel): # pylint: disable=too-few-public-methods
    """État du cache de résultats."""
    size: int
    max_size: int
    hits: int
    misses: int


class HealthResponse(BaseModel): # pylint: disable=too-few-public-methods
    """État du service."""
    status: str
    collator_available: bool
    collator_locale: Optional[str] = None
    cache: CacheStatsResponse
