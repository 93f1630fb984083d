# namecraft/models/base.py
from typing import Any, Dict, Iterable
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

class StoredModel(BaseModel):
    """Base model for records kept in the local store.

    Field names are snake_case in Python and camelCase on disk. Instances are
    frozen so every change goes through an explicit copy.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null on disk means "use the default"
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_storage(self) -> dict:
        """Serialize with the on-disk (camelCase) field names"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def field_values(self) -> dict:
        """Shallow field mapping, nested models kept as instances"""
        return {name: getattr(self, name) for name in type(self).model_fields}

    def merged(self, update_data: Dict[str, Any], protected: Iterable[str] = ()) -> "StoredModel":
        """Return a validated copy with update_data applied.

        Keys may use either the Python or the stored (camelCase) field name.
        Unknown keys and keys naming a protected field are ignored.
        """
        model_fields = type(self).model_fields
        by_alias = {field.alias: name for name, field in model_fields.items() if field.alias}
        protected = set(protected)

        data = self.field_values()
        for key, value in update_data.items():
            name = by_alias.get(key, key)
            if name in model_fields and name not in protected:
                data[name] = value
        return type(self).model_validate(data)
