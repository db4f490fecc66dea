"""Main module for the FastAPI application."""
from fastapi import Depends, FastAPI

from .engine import DistanceEngine, default_engine
from .logger import logger
from .models import CacheStatsResponse, DistanceRequest, DistanceResponse, HealthResponse


app = FastAPI(title="levenpy - Levenshtein distance service")


def get_engine() -> DistanceEngine:
    """Dépendance FastAPI pour obtenir le moteur de distance."""
    return default_engine()


@app.post("/distance", response_model=DistanceResponse)
def distance_endpoint(req: DistanceRequest, engine: DistanceEngine = Depends(get_engine)):
    """POST /distance endpoint."""
    result = engine.compute(req.a, req.b, req.options)
    logger.debug("distance({a!r}, {b!r}) = {d}", a=req.a, b=req.b, d=result.distance)
    return DistanceResponse(
        distance=result.distance,
        used_collator=result.used_collator,
        cached=result.cached,
    )


@app.get("/")
def root():
    """Root endpoint to check API status."""
    return {"status": "ok", "message": "levenpy API is running"}


@app.get("/health", response_model=HealthResponse, tags=["Monitoring"])
def health_check(engine: DistanceEngine = Depends(get_engine)):
    """
    Health check endpoint.

    Reports whether the locale comparator is available and the cache usage.
    """
    stats = engine.cache.stats()
    return HealthResponse(
        status="ok",
        collator_available=engine.collator_available,
        collator_locale=engine.comparator.locale,
        cache=CacheStatsResponse(
            size=stats.size,
            max_size=stats.max_size,
            hits=stats.hits,
            misses=stats.misses,
        ),
    )
