"""Loading validation declarations from YAML and logging setup."""

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

import yaml
from returns.result import Failure, Result, Success

from validatable.errors import DeclarationLoadError, ValidatableError

APP_NAME = "validatable"

logger = logging.getLogger(APP_NAME)


def configure_logging(debug: bool, stream: TextIO | None = None) -> None:
    """Set the `validatable` log level and attach a plain message handler.

    Only handlers on the package logger itself are considered, so a handler
    on the root logger does not stop one being attached here. Calling this
    again only changes the level.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        return

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


def load_declaration(path: Path) -> Result[dict[str, dict[str, Any]], ValidatableError]:
    """Loads a validation declaration from a YAML file, returning a Result.

    The file maps field names to {rule name: argument}:

        age:
          isNumeric: true
          isMoreThan: 18
        email:
          matches: {value: "@", message: "this isn't an email"}

    An empty file is an empty declaration.
    """
    path = Path(path)
    if not path.is_file():
        return Failure(DeclarationLoadError(f"Declaration file not found: {path}"))

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        return Failure(DeclarationLoadError(f"Failed to read or parse {path}: {e}"))

    if content is None:
        return Success({})
    if not isinstance(content, Mapping):
        return Failure(
            DeclarationLoadError(f"{path} must map field names to rules")
        )

    declaration: dict[str, dict[str, Any]] = {}
    for field_name, field_rules in content.items():
        if not isinstance(field_rules, Mapping):
            return Failure(
                DeclarationLoadError(
                    f"Rules for field '{field_name}' in {path} must be a mapping"
                )
            )
        declaration[str(field_name)] = dict(field_rules)

    logger.debug(f"Loaded validations for {len(declaration)} fields from {path}")
    return Success(declaration)
