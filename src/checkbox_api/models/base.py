"""
Base model for Checkbox API entities

Every entity maps to and from decoded JSON through ``from_json`` and
``to_json``. Unknown fields in API payloads are ignored; unset optional
fields are left out of serialized output.
"""

from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from checkbox_api.exceptions import MappingError


M = TypeVar("M", bound="ApiModel")


def _mapping_error(model_name: str, error: PydanticValidationError) -> MappingError:
    """Build a MappingError naming the first offending field"""
    errors = error.errors(include_url=False)
    first = errors[0]
    field = ".".join(str(part) for part in first["loc"]) or None

    if first["type"] == "missing":
        message = f"{model_name}: required field '{field}' is missing"
    else:
        message = f"{model_name}: invalid value for '{field}': {first['msg']}"

    details = [
        {"field": ".".join(str(p) for p in e["loc"]), "type": e["type"], "message": e["msg"]}
        for e in errors
    ]
    return MappingError(message, field=field, details=details, cause=error)


class ApiModel(BaseModel):
    """Base class for all API entities"""

    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
    }

    @classmethod
    def from_json(cls: Type[M], data: Any) -> M:
        """
        Map a decoded JSON object onto the model

        Args:
            data: Decoded JSON payload

        Returns:
            Model instance

        Raises:
            MappingError: If payload is not an object or a required field
                is missing or invalid
        """
        if not isinstance(data, dict):
            raise MappingError(
                f"{cls.__name__}: expected a JSON object, got {type(data).__name__}",
                details=data,
            )

        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise _mapping_error(cls.__name__, e) from e

    @classmethod
    def list_from_json(cls: Type[M], data: Any) -> List[M]:
        """Map a decoded JSON array onto a list of models"""
        if not isinstance(data, list):
            raise MappingError(
                f"{cls.__name__}: expected a JSON array, got {type(data).__name__}",
                details=data,
            )
        return [cls.from_json(item) for item in data]

    def to_json(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting unset optional fields"""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)
