from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CategoryCreate(BaseModel):
    # nom vide ou fait d'espaces refusé (422)
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    color: str = Field("#4F46E5", pattern=HEX_COLOR_PATTERN)


class CategoryUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)


class CategoryResponse(BaseModel):
    id: int
    user_id: int
    name: str
    color: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
