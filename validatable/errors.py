"""Exception hierarchy for validatable.

Validation failures are never raised; they end up as messages in a
``ValidationReport``. The exceptions here signal mistakes in a validation
declaration or in loading one.
"""

from typing import Optional


class ValidatableError(Exception):
    """Base exception for all validatable errors."""

    pass


class ConfigurationError(ValidatableError):
    """Raised when a validation declaration cannot be evaluated."""

    def __init__(
        self,
        message: str,
        rule_name: Optional[str] = None,
        type_name: Optional[str] = None,
    ) -> None:
        self.rule_name = rule_name
        self.type_name = type_name
        super().__init__(message)


class UnknownRuleError(ConfigurationError):
    """Raised when a declaration names a rule that is not registered."""

    def __init__(self, rule_name: str, type_name: Optional[str] = None) -> None:
        where = f" in class `{type_name}`" if type_name else ""
        super().__init__(
            f"Validation `{rule_name}` was not found{where}",
            rule_name=rule_name,
            type_name=type_name,
        )


class UnknownPredicateError(ConfigurationError):
    """Raised when a `function` rule names a predicate the object lacks."""

    def __init__(self, predicate_name: str, type_name: Optional[str] = None) -> None:
        self.predicate_name = predicate_name
        where = f" on `{type_name}`" if type_name else ""
        super().__init__(
            f"Validation predicate `{predicate_name}` was not found{where}",
            rule_name="function",
            type_name=type_name,
        )


class ParseError(ConfigurationError, ValueError):
    """Raised when a value cannot be coerced to a number for a numeric rule."""

    pass


class DeclarationLoadError(ValidatableError):
    """Raised for missing or malformed validation declaration files."""

    pass
