from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, List, Optional


class FieldOptions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    maxSelect: Optional[int] = None
    collectionId: Optional[str] = None


class FieldDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    type: str
    required: bool = False
    system: bool = False
    options: FieldOptions = Field(default_factory=FieldOptions)

    @model_validator(mode="before")
    @classmethod
    def _lift_flat_options(cls, data: Any) -> Any:
        # PocketBase >= 0.23 puts maxSelect/collectionId on the field itself
        if isinstance(data, dict) and data.get("options") is None:
            flat = {k: data[k] for k in ("maxSelect", "collectionId") if k in data}
            data = {**data, "options": flat}
        return data

    @property
    def max_select(self) -> int:
        """Selection limit, with unset and 0 treated as single-valued."""
        return self.options.maxSelect or 1


class CollectionDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    type: str = "base"
    system: bool = False
    fields: Optional[List[FieldDescriptor]] = None

    @property
    def is_view(self) -> bool:
        return self.type == "view"
