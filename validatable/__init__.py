"""Declarative per-field validation for objects with named attributes.

A class declares which rules apply to which fields; validate() checks the
current values and fills validation_errors with messages per field.

Example:
--------
    class Employee(Attributes, Validatable):
        attribute_names = ["first_name", "age", "sex", "email"]

        validations = {
            "first_name": {"isShorterThan": 30, "isLongerThan": 1},
            "age": {"isNumeric": True, "isMoreThan": 18},
            "sex": {"isOneOf": ["f", "m"], "isNotEmpty": True},
            "email": {"matches": {"value": "@", "message": "this isn't an email"}},
        }

    employee = Employee(first_name="Vincent")
    employee.validate()
    employee.valid              # False
    employee.validation_errors  # {"first_name": (), "age": ("should be more than 18",), ...}

Built-in Rules:
---------------
    - isNumeric: value is (true) or is not (false) a string of digits
    - isLessThan / isMoreThan: numeric comparison
    - isOneOf / isNotOneOf: membership in a list
    - isLongerThan / isShorterThan / hasExactLengthOf: length checks
    - matches: regex search
    - isNotNull: value is set
    - isNotEmpty: value, if set, is not empty
    - function: a named zero-argument predicate on the object
"""

from validatable.attributes import Attributes
from validatable.config import configure_logging, load_declaration
from validatable.core.interfaces import Attributable
from validatable.engine import (
    ValidationDeclaration,
    ValidationReport,
    apply_rule,
    run_validation,
)
from validatable.errors import (
    ConfigurationError,
    DeclarationLoadError,
    ParseError,
    UnknownPredicateError,
    UnknownRuleError,
    ValidatableError,
)
from validatable.mixin import Validatable, validation_predicate
from validatable.rules import (
    BUILTIN_RULES,
    RULE_REGISTRY,
    RuleSpec,
    get_rule,
    register_rule,
)

__version__ = "0.1.0"

__all__ = [
    # Object model
    "Attributable",
    "Attributes",
    "Validatable",
    "validation_predicate",
    # Engine
    "run_validation",
    "apply_rule",
    "ValidationReport",
    "ValidationDeclaration",
    # Registry
    "RULE_REGISTRY",
    "BUILTIN_RULES",
    "RuleSpec",
    "register_rule",
    "get_rule",
    # Configuration
    "load_declaration",
    "configure_logging",
    # Exceptions
    "ValidatableError",
    "ConfigurationError",
    "UnknownRuleError",
    "UnknownPredicateError",
    "ParseError",
    "DeclarationLoadError",
]
