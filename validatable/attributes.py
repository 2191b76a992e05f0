"""Dynamic attribute storage for validated objects.

A class lists its fields in ``attribute_names``; each declared field reads as
``None`` until it is assigned. This is the storage side the validation engine
reads through the ``Attributable`` protocol.

    class Employee(Attributes, Validatable):
        attribute_names = ["first_name", "age"]
        validations = {"age": {"isNumeric": True}}
"""

from typing import Any, ClassVar, Sequence


class Attributes:
    """Mixin providing declared, dynamically stored attributes."""

    attribute_names: ClassVar[Sequence[str]] = ()

    def __init__(self, **values: Any) -> None:
        object.__setattr__(self, "_attribute_values", {})
        super().__init__()
        for name, value in values.items():
            setattr(self, name, value)

    def _values(self) -> dict:
        try:
            return object.__getattribute__(self, "_attribute_values")
        except AttributeError:
            values: dict = {}
            object.__setattr__(self, "_attribute_values", values)
            return values

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name in type(self).attribute_names:
            return self._values().get(name)
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self).attribute_names:
            self._values()[name] = value
        else:
            object.__setattr__(self, name, value)

    def get_field_value(self, field_name: str) -> Any:
        if field_name in type(self).attribute_names:
            return self._values().get(field_name)
        return getattr(self, field_name, None)

    def has_field(self, field_name: str) -> bool:
        return field_name in type(self).attribute_names

    def attributes(self) -> dict[str, Any]:
        """Snapshot of all declared attributes and their current values."""
        values = self._values()
        return {name: values.get(name) for name in type(self).attribute_names}
