"""
ADSL Lookup — FastAPI Backend
=============================
Exposes the exchange lookup over HTTP:
  - GET /lookup?address=...   ExchangeInfo for an address
  - GET /health               Liveness + configuration status

Start:
    uvicorn main_api:app --reload --port 8000

Interactive docs:
    http://localhost:8000/docs
"""

import logging
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

from fastapi import Depends, FastAPI, HTTPException, Query, status
from pydantic import BaseModel

from adsllookup.domain.errors import (
    AddressNotFoundError,
    ExtractionError,
    NetworkError,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s  %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(title="ADSL Lookup API", version="1.0.0")

# ── Dependency-injection container (initialised at startup) ───────────────────

_container = None
_startup_error: Optional[str] = None


@app.on_event("startup")
def startup():
    global _container, _startup_error
    try:
        from adsllookup.infrastructure.config import Config
        from adsllookup.infrastructure.container import Container

        _container = Container(Config.from_env())
        _startup_error = None
        logger.info("Container initialised successfully.")
    except EnvironmentError as e:
        _startup_error = str(e)
        logger.error(f"Container startup failed: {e}")


def get_container():
    if _startup_error:
        raise HTTPException(status_code=503, detail=f"Service misconfigured: {_startup_error}")
    if _container is None:
        raise HTTPException(status_code=503, detail="Service not ready.")
    return _container


# ── Response models ───────────────────────────────────────────────────────────


class EquipmentProviderOut(BaseModel):
    name: str
    status: str
    estimate: str
    available: bool


class ExchangeInfoOut(BaseModel):
    exchange: str
    zone: int
    distance: float
    cable_length: float
    estimated_speed: int
    nbn_available: bool
    providers: List[EquipmentProviderOut]


# ── Routes ────────────────────────────────────────────────────────────────────


@app.get("/health", tags=["meta"])
def health():
    return {
        "status": "ok" if _container is not None and not _startup_error else "degraded",
        "error": _startup_error,
    }


@app.get("/lookup", response_model=ExchangeInfoOut, tags=["lookup"])
def lookup(
    address: str = Query(..., min_length=1, description="Free-form street address"),
    container=Depends(get_container),
):
    try:
        info = container.lookup(address)
    except AddressNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ExtractionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Unexpected response from lookup site: {e}",
        )
    except NetworkError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Could not reach lookup site: {e}",
        )

    return ExchangeInfoOut(**info.to_dict())
