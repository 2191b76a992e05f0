"""Validation mixin for objects with declared fields."""

from types import MappingProxyType
from typing import Any, Callable, ClassVar, Mapping, Optional

from validatable.engine import ValidationDeclaration, ValidationReport, run_validation

_PREDICATE_MARKER = "__validation_predicate__"


def validation_predicate(name_or_fn: Any = None) -> Any:
    """Mark a zero-argument method as a predicate for `function` rules.

    The predicate is registered under the method name, or under an explicit
    name:

        @validation_predicate
        def has_contact(self): ...

        @validation_predicate("adult")
        def is_adult(self): ...
    """

    def _mark(fn: Callable, name: Optional[str] = None) -> Callable:
        setattr(fn, _PREDICATE_MARKER, name or fn.__name__)
        return fn

    if callable(name_or_fn):
        return _mark(name_or_fn)
    return lambda fn: _mark(fn, name_or_fn)


class Validatable:
    """Base validator mixin for objects with declared fields.

    This is a mixin class that expects the implementing class to provide:
    - validations: mapping of field name to {rule name: argument}
    - get_field_value(name): current value of a field (see Attributes)

    After validate(), validation_errors is a read-only mapping holding one tuple of
    messages per declared field, and valid is True iff all of them are empty.
    """

    validations: ClassVar[ValidationDeclaration] = {}
    validation_predicates: ClassVar[Mapping[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        predicates = dict(getattr(cls, "validation_predicates", {}))
        for attribute, member in vars(cls).items():
            name = getattr(member, _PREDICATE_MARKER, None)
            if name is not None:
                predicates[name] = attribute
        cls.validation_predicates = predicates

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.valid = True
        self.validation_errors: Mapping[str, tuple[str, ...]] = MappingProxyType({})
        self.last_report: Optional[ValidationReport] = None

    def validate(self) -> None:
        """Runs all the validations against the current field values."""
        report = run_validation(
            self.validations,
            self,  # type: ignore[arg-type]
            type_name=type(self).__name__,
        )
        self.last_report = report
        self.validation_errors = report.errors
        self.valid = report.valid
