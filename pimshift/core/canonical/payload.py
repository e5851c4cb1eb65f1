"""Pydantic models for raw PIM variant resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ValueRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: Any = None
    locale: str | None = None
    scope: str | None = None

    @property
    def is_list(self) -> bool:
        return isinstance(self.data, (list, tuple))

    def applies_to(self, scope: str | None) -> bool:
        return self.scope is None or self.scope == scope


class VariantResource(BaseModel):
    model_config = ConfigDict(extra="allow")

    identifier: str = Field(..., min_length=1, examples=["SHOES-42"])
    parent: str | None = Field(default=None, examples=["SHOES"])
    values: dict[str, list[ValueRecord]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _compat_code(cls, data: Any) -> Any:
        """Accept ``code`` as an alias of ``identifier``."""
        if isinstance(data, dict) and "identifier" not in data and "code" in data:
            data = dict(data)
            data["identifier"] = data.pop("code")
        return data

    @field_validator("values", mode="before")
    @classmethod
    def _wrap_single_records(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        return {
            str(code): [records] if isinstance(records, dict) else records
            for code, records in value.items()
        }

    def attribute_codes(self) -> list[str]:
        return list(self.values.keys())


def parse_resource(resource: VariantResource | dict[str, Any]) -> VariantResource:
    if isinstance(resource, VariantResource):
        return resource
    return VariantResource.model_validate(resource)


__all__ = ["ValueRecord", "VariantResource", "parse_resource"]
