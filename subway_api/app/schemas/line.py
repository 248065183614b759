"""
Pydantic schemas for subway lines.

A line has a name, a color and two terminal stations (up and down)
separated by a positive distance.  Clients send the station fields in
camelCase (``upStationId``), which is accepted alongside the
snake_case attribute names.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from subway_api.app.core.db import SQLITE_MAX_INTEGER

from .station import StationRead


def _not_blank(value: Optional[str], field_name: str) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError(f"{field_name} must not be blank")
    return value


class LineCreate(BaseModel):
    """Schema for creating a new line."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Line name, unique among lines")
    color: str = Field(..., description="Display color, e.g. bg-red-600")
    up_station_id: int = Field(..., alias="upStationId", le=SQLITE_MAX_INTEGER)
    down_station_id: int = Field(..., alias="downStationId", le=SQLITE_MAX_INTEGER)
    distance: int = Field(..., gt=0, le=SQLITE_MAX_INTEGER, description="Distance between the terminal stations")

    @field_validator("name", "color")
    @classmethod
    def validate_text(cls, v: str, info) -> str:
        return _not_blank(v, info.field_name)

    @model_validator(mode="after")
    def validate_stations(self) -> "LineCreate":
        if self.up_station_id == self.down_station_id:
            raise ValueError("Up and down stations must differ")
        return self


class LineUpdate(BaseModel):
    """Schema for updating an existing line.

    All fields are optional; only provided values will be updated.
    """

    name: Optional[str] = None
    color: Optional[str] = None

    @field_validator("name", "color")
    @classmethod
    def validate_text(cls, v: Optional[str], info) -> Optional[str]:
        return _not_blank(v, info.field_name)


class LineRead(BaseModel):
    """Schema for reading a line.

    ``stations`` lists the up station followed by the down station.
    """

    id: int
    name: str
    color: str
    stations: List[StationRead] = []
