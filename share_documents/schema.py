from typing import Any

from pydantic import BaseModel, Field, field_validator


class KeysModel(BaseModel):
    n: int = Field(ge=0)
    k: int = Field(ge=1)


class ShareEntryModel(BaseModel):
    # "10" and 10 are both accepted; the range check is left to the decoder
    base: int
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def _numeric_value_as_text(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
