"""Review DTOs."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class SubmitReviewDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    line_id: UUID
    username: str
    rating: int
    review: str
    image_url: Optional[str] = None

    @field_validator("username", "review")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class UpdateReviewDTO(SubmitReviewDTO):
    """Same fields; an omitted ``image_url`` keeps the current image."""
