"""Canvas Schemas — connection payload."""

from datetime import datetime

from pydantic import BaseModel, Field


class CanvasConnect(BaseModel):
    canvas_api_key: str = Field(min_length=1, max_length=500)
    canvas_api_expiration: datetime
