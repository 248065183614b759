"""Pydantic schemas for stations."""

from pydantic import BaseModel, Field, field_validator


class StationCreate(BaseModel):
    """Schema for creating a new station."""

    name: str = Field(..., description="Station name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Station name must not be blank")
        return v


class StationRead(BaseModel):
    """Schema for reading a station."""

    id: int
    name: str
