"""Health and readiness routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import require_healthcheck_token

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "Helper intents fulfillment. POST Dialogflow requests to /webhook."}


@router.get("/alive")
async def alive_check(_: None = Depends(require_healthcheck_token)) -> JSONResponse:
    """Liveness check for load balancers; token-guarded when auth is enabled."""
    return JSONResponse({"status": "ok", "message": "Helper intents engine is alive."})


__all__ = ["router"]
