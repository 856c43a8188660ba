from __future__ import annotations
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .constants import (
    ALL_SEATS, DEFAULT_ROLE, FIRST_ROTATION, LAST_ROTATION,
    normalize_name, normalize_number,
)


class Seat(BaseModel):
    id: int
    label: str
    name: str
    kind: Literal["court", "bench"]
    display_order: int


class Player(BaseModel):
    id: str
    name: str = ""
    number: str = ""
    role: str = DEFAULT_ROLE
    start_seat: int = Field(frozen=True)  # home seat at rotation 1

    @field_validator("name", mode="before")
    @classmethod
    def _clean_name(cls, v):
        return normalize_name(v)

    @field_validator("number", mode="before")
    @classmethod
    def _clean_number(cls, v):
        return normalize_number(v)

    @field_validator("role", mode="before")
    @classmethod
    def _clean_role(cls, v):
        v = "" if v is None else str(v).strip()
        return v or DEFAULT_ROLE

    @field_validator("start_seat")
    @classmethod
    def _known_seat(cls, v):
        if v not in ALL_SEATS:
            raise ValueError(f"start_seat must be one of {ALL_SEATS}, got {v}")
        return v


class PlannerState(BaseModel):
    rotation: int = Field(default=FIRST_ROTATION, ge=FIRST_ROTATION, le=LAST_ROTATION)
    view_mode: Literal["court", "table"] = "court"


class AppConfig(BaseModel):
    team_name: str = "11-Player Rotation"
    start_rotation: int = Field(default=FIRST_ROTATION, ge=FIRST_ROTATION, le=LAST_ROTATION)
    default_view: Literal["court", "table"] = "court"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _level_name(cls, v):
        v = str(v).strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v
