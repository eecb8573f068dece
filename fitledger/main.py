from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .errors import FoodDataUnavailable, InvalidInput, StoreUnavailable
from .routes.dates import router as dates_router
from .routes.entries import router as entries_router
from .routes.foods import router as foods_router
from .routes.goals import router as goals_router
from .routes.users import router as users_router
from .security import verify_api_key

logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title="Fitness Ledger",
    version="1.0.0",
    description="Per-user food, exercise and nutrition goal ledger",
)


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": {"error": str(exc)}})


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(
    request: Request, exc: StoreUnavailable
) -> JSONResponse:
    logger.warning("Ledger store unavailable for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={"detail": {"error": "Ledger store unavailable", "path": exc.path}},
    )


@app.exception_handler(FoodDataUnavailable)
async def food_data_unavailable_handler(
    request: Request, exc: FoodDataUnavailable
) -> JSONResponse:
    logger.warning("Food lookup failed for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=502, content={"detail": {"error": "Food lookup unavailable"}}
    )


for router in (
    users_router,
    dates_router,
    entries_router,
    goals_router,
    foods_router,
):
    app.include_router(router, prefix="/v1", dependencies=[Depends(verify_api_key)])
