"""Canvas Routes — store the user's Canvas token and report its expiry."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from slate.api.dependencies import get_clock, require_auth
from slate.core.domain_types import Clock, UserId
from slate.infrastructure.database import get_db
from slate.schemas.canvas import CanvasConnect
from slate.services import canvas_service

router = APIRouter(prefix="/api/canvas", tags=["canvas"])


@router.post("/connect")
async def connect_canvas(
    body: CanvasConnect,
    user_id: UserId = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    await canvas_service.connect(
        db, user_id, body.canvas_api_key, body.canvas_api_expiration,
    )
    return {"message": "Canvas connected successfully"}


@router.get("/status")
async def canvas_status(
    user_id: UserId = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    return await canvas_service.token_status(db, user_id, clock)
