# engine.py
#
# Runs a validation declaration against an object's current field values.
# Rule handlers report pass/fail through the `returns` Result type; the engine
# resolves messages and assembles an immutable ValidationReport per call.

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, TypeAlias

from returns.result import Failure, Result, Success

from validatable.core.interfaces import Attributable
from validatable.errors import ConfigurationError
from validatable.rules import RULE_REGISTRY, RuleHandler, RuleSpec, get_rule

logger = logging.getLogger(__name__)


FieldRules: TypeAlias = Mapping[str, Any]
ValidationDeclaration: TypeAlias = Mapping[str, FieldRules]


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of one validation pass: error messages per declared field."""

    errors: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def valid(self) -> bool:
        return all(not messages for messages in self.errors.values())

    def errors_for(self, field_name: str) -> tuple[str, ...]:
        return self.errors.get(field_name, ())

    def to_dict(self) -> dict[str, list[str]]:
        """Plain mutable copy, one list per field."""
        return {name: list(messages) for name, messages in self.errors.items()}


def _invoke(
    handler: RuleHandler,
    rule_name: str,
    value: Any,
    spec: RuleSpec,
    target: Any,
    type_name: Optional[str],
) -> Result[str, str]:
    result = handler(value, spec, target=target, type_name=type_name)

    if isinstance(result, Failure):
        default_message = result.failure()
        return Failure(spec.message if spec.message is not None else default_message)
    elif isinstance(result, Success):
        return result
    raise ConfigurationError(
        f"Validation `{rule_name}` returned {type(result).__name__}, expected a Result",
        rule_name=rule_name,
        type_name=type_name,
    )


def apply_rule(
    rule_name: str,
    value: Any,
    raw_argument: Any,
    *,
    target: Any = None,
    type_name: Optional[str] = None,
    registry: Mapping[str, RuleHandler] = RULE_REGISTRY,
) -> Result[str, str]:
    """Applies a single rule to a value.

    Returns Success on pass, or Failure carrying the resolved error message
    (the declared custom message if any, else the rule's default).
    """
    spec = RuleSpec.from_argument(raw_argument)
    handler = get_rule(rule_name, type_name, registry)
    return _invoke(handler, rule_name, value, spec, target, type_name)


def run_validation(
    declaration: ValidationDeclaration,
    accessor: Attributable,
    *,
    target: Any = None,
    type_name: Optional[str] = None,
    registry: Mapping[str, RuleHandler] = RULE_REGISTRY,
) -> ValidationReport:
    """Validates every declared field and returns a fresh report.

    Fields and rules are processed in declaration order. Any
    ConfigurationError (unknown rule, unknown predicate, unparseable number)
    propagates and no report is produced.
    """
    if target is None:
        target = accessor
    if type_name is None:
        type_name = type(target).__name__

    collected: dict[str, list[str]] = {}
    try:
        for field_name, field_rules in declaration.items():
            messages = collected.setdefault(field_name, [])
            for rule_name, raw_argument in field_rules.items():
                spec = RuleSpec.from_argument(raw_argument)
                handler = get_rule(rule_name, type_name, registry)
                value = accessor.get_field_value(field_name)
                result = _invoke(handler, rule_name, value, spec, target, type_name)
                if isinstance(result, Failure):
                    logger.debug(
                        f"{type_name}.{field_name} failed `{rule_name}`: {result.failure()}"
                    )
                    messages.append(result.failure())
    except ConfigurationError as e:
        if e.type_name is None:
            e.type_name = type_name
        logger.error(f"Validation of {type_name} aborted: {e}")
        raise

    report = ValidationReport(
        MappingProxyType(
            {name: tuple(messages) for name, messages in collected.items()}
        )
    )
    logger.debug(
        f"Validated {type_name}: {'valid' if report.valid else 'invalid'} "
        f"({sum(len(m) for m in report.errors.values())} errors)"
    )
    return report
