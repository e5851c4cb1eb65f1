from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AttributeDefinition:
    code: str
    type: str
    localizable: bool = False
    scopable: bool = False


class AttributePropertiesProvider:
    """Declared PIM properties of each attribute, keyed by attribute code."""

    def __init__(self, definitions: Iterable[AttributeDefinition] = ()) -> None:
        self._definitions: dict[str, AttributeDefinition] = {}
        for definition in definitions:
            self._definitions[definition.code] = definition

    @classmethod
    def from_payloads(cls, payloads: Iterable[Mapping[str, Any]]) -> "AttributePropertiesProvider":
        """Build from raw PIM attribute payloads (``code``, ``type``, ``localizable``, ``scopable``)."""
        definitions = [
            AttributeDefinition(
                code=str(payload["code"]),
                type=str(payload.get("type") or ""),
                localizable=bool(payload.get("localizable", False)),
                scopable=bool(payload.get("scopable", False)),
            )
            for payload in payloads
            if payload.get("code")
        ]
        return cls(definitions)

    def get_type(self, attribute_code: str) -> str:
        definition = self._definitions.get(attribute_code)
        return definition.type if definition is not None else ""

    def is_localizable(self, attribute_code: str) -> bool:
        definition = self._definitions.get(attribute_code)
        return bool(definition and definition.localizable)

    def is_scopable(self, attribute_code: str) -> bool:
        definition = self._definitions.get(attribute_code)
        return bool(definition and definition.scopable)


__all__ = ["AttributeDefinition", "AttributePropertiesProvider"]
