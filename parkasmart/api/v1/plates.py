"""Plate helpers backing the entry form's slot input."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from parkasmart.services.plates import (
    PlateSlots,
    is_partially_valid_plate,
    is_valid_plate_number,
    normalize_plate,
)

router = APIRouter(prefix="/plates", tags=["plates"])


class PlateCheck(BaseModel):
    plate: str
    valid: bool
    partial: bool
    normalized: str


class PasteRequest(BaseModel):
    text: str = Field(max_length=100)


class PasteResult(BaseModel):
    slots: list[str]
    plate: str
    valid: bool


@router.get("/check", response_model=PlateCheck)
async def check_plate(plate: str = "") -> PlateCheck:
    return PlateCheck(
        plate=plate,
        valid=is_valid_plate_number(plate),
        partial=is_partially_valid_plate(plate),
        normalized=normalize_plate(plate),
    )


@router.post("/paste", response_model=PasteResult)
async def paste_plate(body: PasteRequest) -> PasteResult:
    """Spread pasted text over the seven slots."""
    slots = PlateSlots.from_paste(body.text)
    return PasteResult(slots=slots.chars, plate=slots.compose(), valid=slots.is_valid)
