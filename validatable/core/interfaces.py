"""Protocol interfaces for attribute validation.

Protocols that decouple the validation engine from attribute storage.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Attributable(Protocol):
    """Minimal interface for an object whose fields can be validated."""

    def get_field_value(self, field_name: str) -> Any:
        """Current value of a named field, or None if unset."""
        ...

    def has_field(self, field_name: str) -> bool:
        """Whether the object declares a field with this name."""
        ...
