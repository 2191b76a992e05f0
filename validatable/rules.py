# rules.py
#
# The rule catalog: every named validation rule and the registry that maps
# rule names to handlers.
#
# Handlers follow one signature:
#
#     handler(value, spec, **context) -> Result[str, str]
#
# `value` is the current field value, `spec` is the normalized RuleSpec and
# `context` carries `target` (the validated object) and `type_name`. A handler
# returns Success(description) when the value passes and
# Failure(default_message) when it does not. Declaration mistakes are raised as
# ConfigurationError subclasses, never returned.

import logging
import re
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from numbers import Number
from typing import Any, Callable, Optional, TypeAlias

from returns.result import Failure, Result, Success

from validatable.errors import (
    ConfigurationError,
    ParseError,
    UnknownPredicateError,
    UnknownRuleError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuleSpec:
    """Normalized rule argument: the rule value plus an optional message."""

    value: Any
    message: Optional[str] = None

    @classmethod
    def from_argument(cls, raw: Any) -> "RuleSpec":
        """Wrap a bare argument, or unpack a ``{value, message}`` mapping."""
        if isinstance(raw, RuleSpec):
            return raw
        if isinstance(raw, Mapping) and "value" in raw and "message" in raw:
            return cls(raw["value"], raw["message"])
        return cls(raw, None)


RuleResult: TypeAlias = Result[str, str]
RuleHandler: TypeAlias = Callable[..., RuleResult]

_DIGITS = re.compile(r"\d+", re.ASCII)


# Coercion helpers


def _to_number(value: Any, rule_name: str) -> float | int:
    """Numeric value of a number or a base-10 numeric string."""
    if isinstance(value, bool):
        raise ParseError(
            f"`{rule_name}` cannot compare a boolean value", rule_name=rule_name
        )
    if isinstance(value, Number):
        return value  # type: ignore[return-value]
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            raise ParseError(
                f"`{rule_name}` cannot parse '{value}' as a number",
                rule_name=rule_name,
            ) from None
    raise ParseError(
        f"`{rule_name}` cannot coerce {type(value).__name__} to a number",
        rule_name=rule_name,
    )


def _length(value: Any, rule_name: str) -> int:
    try:
        return len(value)
    except TypeError:
        raise ConfigurationError(
            f"`{rule_name}` requires a sized value, got {type(value).__name__}",
            rule_name=rule_name,
        ) from None


def _members(spec: RuleSpec, rule_name: str) -> Collection:
    if isinstance(spec.value, str) or not isinstance(spec.value, Collection):
        raise ConfigurationError(
            f"`{rule_name}` expects a list of values, got {spec.value!r}",
            rule_name=rule_name,
        )
    return spec.value


def _is_member(value: Any, members: Collection) -> bool:
    # bool is an int subclass; True must not match 1
    return any(
        member == value and isinstance(member, bool) == isinstance(value, bool)
        for member in members
    )


def _join(values: Collection) -> str:
    return ", ".join(str(v) for v in values)


# Individual rule handlers


def _handle_is_numeric(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    if value is None or (isinstance(value, Number) and not isinstance(value, bool)):
        return Success("Value is a number.")

    is_digits = _DIGITS.fullmatch(str(value)) is not None
    if not is_digits and spec.value:
        return Failure("is not a number")
    if is_digits and not spec.value:
        return Failure("is a number, but it shouldn't be")
    return Success("Value has the expected numeric form.")


def _handle_is_less_than(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    limit = _to_number(spec.value, "isLessThan")
    if value is None or _to_number(value, "isLessThan") >= limit:
        return Failure(f"should be less than {spec.value}")
    return Success(f"Value is less than {spec.value}.")


def _handle_is_more_than(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    limit = _to_number(spec.value, "isMoreThan")
    if value is None or _to_number(value, "isMoreThan") <= limit:
        return Failure(f"should be more than {spec.value}")
    return Success(f"Value is more than {spec.value}.")


def _handle_is_one_of(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    members = _members(spec, "isOneOf")
    if not _is_member(value, members):
        return Failure(f"should be one of the following: {_join(members)}")
    return Success("Value is an allowed member.")


def _handle_is_not_one_of(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    members = _members(spec, "isNotOneOf")
    if _is_member(value, members):
        return Failure(f"should NOT be one of the following: {_join(members)}")
    return Success("Value is not a forbidden member.")


def _handle_is_longer_than(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    limit = _to_number(spec.value, "isLongerThan")
    if value is None or _length(value, "isLongerThan") <= limit:
        return Failure(f"should be longer than {spec.value}")
    return Success(f"Length is more than {spec.value}.")


def _handle_is_shorter_than(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    limit = _to_number(spec.value, "isShorterThan")
    if value is None or _length(value, "isShorterThan") >= limit:
        return Failure(f"should be shorter than {spec.value}")
    return Success(f"Length is less than {spec.value}.")


def _handle_has_exact_length_of(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    expected = _to_number(spec.value, "hasExactLengthOf")
    if value is None or _length(value, "hasExactLengthOf") != expected:
        return Failure(f"should have the length of {spec.value}")
    return Success(f"Length is exactly {spec.value}.")


def _handle_matches(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    if value is None:
        return Failure("has wrong format")
    text = value if isinstance(value, str) else str(value)
    try:
        found = re.search(spec.value, text)
    except (re.error, TypeError) as e:
        raise ConfigurationError(
            f"`matches` has an invalid pattern {spec.value!r}: {e}",
            rule_name="matches",
        ) from e
    if found is None:
        return Failure("has wrong format")
    return Success("Value matches pattern.")


def _handle_is_not_null(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    if value is None:
        return Failure("should not be null")
    return Success("Value is set.")


def _handle_is_not_empty(value: Any, spec: RuleSpec, **_: Any) -> RuleResult:
    # None counts as "not empty"; only a present, zero-length value fails
    if value is None:
        return Success("Value is unset.")
    if _length(value, "isNotEmpty") == 0:
        return Failure("should not be empty")
    return Success("Value is not empty.")


# Methods of the validated object that are never predicates
_RESERVED_NAMES = frozenset(
    {"validate", "get_field_value", "has_field", "attributes"}
)


def _resolve_predicate(
    target: Any, name: str, type_name: Optional[str]
) -> Callable[[], Any]:
    registered = getattr(type(target), "validation_predicates", None) or {}
    if name in registered:
        attribute = registered[name]
    elif not name.startswith("_") and name not in _RESERVED_NAMES:
        attribute = name
    else:
        raise UnknownPredicateError(name, type_name)
    predicate = getattr(target, attribute, None)
    if not callable(predicate):
        raise UnknownPredicateError(name, type_name)
    return predicate


def _handle_function(
    value: Any,
    spec: RuleSpec,
    target: Any = None,
    type_name: Optional[str] = None,
    **_: Any,
) -> RuleResult:
    if not isinstance(spec.value, Mapping) or not isinstance(
        spec.value.get("name"), str
    ):
        raise ConfigurationError(
            "`function` expects a mapping with a predicate `name`",
            rule_name="function",
            type_name=type_name,
        )
    name = spec.value["name"]
    message = spec.value.get("message")
    if message is None:
        message = spec.message
    if message is None:
        raise ConfigurationError(
            f"`function` rule for predicate `{name}` needs a message",
            rule_name="function",
            type_name=type_name,
        )
    if target is None:
        raise ConfigurationError(
            f"`function` rule for predicate `{name}` needs an object to call it on",
            rule_name="function",
            type_name=type_name,
        )

    predicate = _resolve_predicate(target, name, type_name)
    if not predicate():
        return Failure(message)
    return Success(f"Predicate `{name}` holds.")


# Rule registry
# Built-in rules are registered here; register_rule() adds custom ones.

RULE_REGISTRY: dict[str, RuleHandler] = {
    "isNumeric": _handle_is_numeric,
    "isLessThan": _handle_is_less_than,
    "isMoreThan": _handle_is_more_than,
    "isOneOf": _handle_is_one_of,
    "isNotOneOf": _handle_is_not_one_of,
    "isLongerThan": _handle_is_longer_than,
    "isShorterThan": _handle_is_shorter_than,
    "hasExactLengthOf": _handle_has_exact_length_of,
    "matches": _handle_matches,
    "isNotNull": _handle_is_not_null,
    "isNotEmpty": _handle_is_not_empty,
    "function": _handle_function,
}

BUILTIN_RULES = frozenset(RULE_REGISTRY)


def register_rule(
    name: str,
    handler: Optional[RuleHandler] = None,
    *,
    replace: bool = False,
    registry: dict[str, RuleHandler] = RULE_REGISTRY,
):
    """Register a custom rule handler under ``name``.

    Can be called directly or used as a decorator:

        @register_rule("isEven")
        def is_even(value, spec, **_):
            return Success("even") if value % 2 == 0 else Failure("should be even")

    Registering an existing name raises ConfigurationError unless
    ``replace`` is set.
    """

    def _register(fn: RuleHandler) -> RuleHandler:
        if not callable(fn):
            raise ConfigurationError(
                f"Handler for rule `{name}` is not callable", rule_name=name
            )
        if name in registry and not replace:
            raise ConfigurationError(
                f"Validation `{name}` is already registered", rule_name=name
            )
        registry[name] = fn
        logger.debug(f"Registered validation rule `{name}`")
        return fn

    if handler is None:
        return _register
    return _register(handler)


def get_rule(
    name: str,
    type_name: Optional[str] = None,
    registry: Mapping[str, RuleHandler] = RULE_REGISTRY,
) -> RuleHandler:
    """Look up a rule handler, raising UnknownRuleError if it is missing."""
    handler = registry.get(name)
    if handler is None:
        raise UnknownRuleError(name, type_name)
    return handler
