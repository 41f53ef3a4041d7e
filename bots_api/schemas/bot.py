# bots_api/schemas/bot.py
import json
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class BotRecord(BaseModel):
    """A persisted bot as returned by the API (camelCase keys)."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int = Field(..., description="The Bot ID", examples=[1])
    name: str = Field(..., description="The Bot name", examples=["Asistente de compras"])
    price: float = Field(..., description="The Bot price", examples=[17])
    availability: bool = Field(..., description="The Bot availability", examples=[False])
    description: Optional[str] = Field(None, description="The Bot description")
    base_personality: Optional[str] = Field(None, description="Base personality of the Bot", examples=["Amigable y servicial"])
    formality: Optional[str] = Field(None, description="Formality level of the Bot", examples=["Moderada"])
    enthusiasm: Optional[str] = Field(None, description="Enthusiasm level of the Bot", examples=["Moderado"])
    humor: Optional[str] = Field(None, description="Humor level of the Bot", examples=["Ligero"])
    use_case_template: Optional[str] = Field(None, description="Use case template of the Bot", examples=["Conversación"])
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DataResponse(BaseModel, Generic[T]):
    data: T


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Bot No Encontrado"])


class FieldError(BaseModel):
    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    errors: List[FieldError]


# JSON key -> ORM attribute for the writable columns
WRITABLE_FIELDS: Dict[str, str] = {
    "name": "name",
    "price": "price",
    "availability": "availability",
    "description": "description",
    "basePersonality": "base_personality",
    "formality": "formality",
    "enthusiasm": "enthusiasm",
    "humor": "humor",
    "useCaseTemplate": "use_case_template",
}

REQUIRED_COLUMNS = {"name", "price", "availability"}


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1")
    return bool(value)


def _coerce(attr: str, value: Any) -> Any:
    if value is None:
        return None
    if attr == "price":
        return float(value)
    if attr == "availability":
        return to_bool(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def to_columns(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Maps a validated request body onto Bot column attributes.
    Unknown keys (including id and timestamps) are dropped.
    """
    columns = {}
    for key, attr in WRITABLE_FIELDS.items():
        if key not in payload:
            continue
        # null on a NOT NULL column means "leave as is"
        if payload[key] is None and attr in REQUIRED_COLUMNS:
            continue
        columns[attr] = _coerce(attr, payload[key])
    return columns
