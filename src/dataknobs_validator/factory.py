"""Factory for building schemas from declarative configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

import yaml
from dataknobs_config import FactoryBase

from .base import Schema
from .exceptions import SchemaConfigError
from .string_schema import BUILTIN_TRANSFORMS
from .validator import Validator

logger = logging.getLogger(__name__)

#: Modifier options every schema kind accepts
MODIFIER_OPTIONS = frozenset(["nullable", "nullish", "optional", "default", "catch", "default_catch"])

#: Chainable options per schema kind, aliases included
KIND_OPTIONS: dict[str, frozenset[str]] = {
    "string": frozenset([
        "coerce", "min", "max", "length", "non_empty", "starts_with", "ends_with",
        "email", "base64", "alpha", "alphanumeric", "numeric", "postal",
        "iso31661_alpha2", "iban", "bic", "ip", "trim", "to_lower_case",
        "to_upper_case", "capitalized",
    ]),
    "number": frozenset([
        "coerce", "integer", "int", "positive", "negative", "min", "max", "multiple_of", "step",
    ]),
    "boolean": frozenset(["coerce", "boolish", "truthy", "falsy", "true", "false"]),
    "date": frozenset(["raw", "before", "after", "populate", "enforce"]),
    "literal": frozenset(),
    "enum": frozenset(),
    "object": frozenset(["non_empty"]),
    "array": frozenset(["min", "max", "non_empty"]),
}

#: Options whose value is always the single argument, whatever its type
SINGLE_ARGUMENT_OPTIONS = frozenset(["default", "catch", "default_catch"])

#: Keys consumed by the constructor rather than by a chained call
STRUCTURAL_KEYS = frozenset(["type", "value", "values", "shape", "of", "transforms"])


class SchemaFactory(FactoryBase):
    """Factory for creating schemas from configuration.

    Configuration Options:
        type (str): Schema kind: string, number, boolean, date, literal, enum,
            object or array
        value (any): The accepted value of a literal schema
        values (list): The accepted values of an enum schema
        shape (dict): Key -> nested configuration of an object schema
        of (dict): Nested configuration of the elements of an array schema
        transforms (list): Built-in string transforms in order of application
            (trim, to_lower_case, to_upper_case, capitalized)

    Every other key names a chained method. ``true`` calls it without
    arguments, a list is passed positionally, a mapping as keyword arguments
    and any other value as the only argument. ``false`` or ``null`` skips the
    call. ``default`` and ``catch`` always take their value as the only
    argument.

    Example Configuration:
        type: object
        shape:
          name:
            type: string
            transforms: [trim]
            min: 3
          age:
            type: number
            integer: true
            min: 0
          role:
            type: enum
            values: [admin, user]
            default: user
    """

    def create(self, **config: Any) -> Schema[Any]:
        """Create a schema from configuration.

        Args:
            **config: Schema configuration

        Returns:
            The configured schema

        Raises:
            SchemaConfigError: If the configuration cannot describe a schema
        """
        kind = config.get("type")
        if kind not in KIND_OPTIONS:
            raise SchemaConfigError(
                f"Unknown schema type: {kind!r}",
                context={"type": kind, "available": sorted(KIND_OPTIONS)},
            )

        logger.debug(f"Creating {kind} schema")
        schema = self._construct(kind, config)

        transforms = config.get("transforms") or []
        if isinstance(transforms, str):
            transforms = [transforms]
        for name in transforms:
            if kind != "string" or name not in BUILTIN_TRANSFORMS:
                raise SchemaConfigError(
                    f"Unknown transform for {kind} schema: {name!r}",
                    context={"type": kind, "transform": name},
                )
            getattr(schema, name)()

        allowed = KIND_OPTIONS[kind] | MODIFIER_OPTIONS
        for option, setting in config.items():
            if option in STRUCTURAL_KEYS:
                continue
            if option not in allowed:
                logger.warning(f"Unknown option for {kind} schema: {option}")
                continue
            self._apply(schema, option, setting)

        return schema

    def _construct(self, kind: str, config: dict[str, Any]) -> Schema[Any]:
        if kind == "literal":
            if "value" not in config:
                raise SchemaConfigError("Literal schema requires 'value'", context={"type": kind})
            return Validator.literal(config["value"])
        if kind == "enum":
            if "values" not in config:
                raise SchemaConfigError("Enum schema requires 'values'", context={"type": kind})
            return Validator.enum(config["values"])
        if kind == "object":
            shape = config.get("shape")
            if not isinstance(shape, Mapping):
                raise SchemaConfigError(
                    "Object schema requires a 'shape' mapping", context={"type": kind}
                )
            return Validator.object({
                key: self._nested(child, f"shape.{key}") for key, child in shape.items()
            })
        if kind == "array":
            if "of" not in config:
                raise SchemaConfigError("Array schema requires 'of'", context={"type": kind})
            return Validator.array(self._nested(config["of"], "of"))
        return getattr(Validator, kind)()

    def _nested(self, child: Any, path: str) -> Schema[Any]:
        if isinstance(child, Schema):
            return child
        if not isinstance(child, Mapping):
            raise SchemaConfigError(
                f"Nested schema configuration at '{path}' must be a mapping",
                context={"path": path, "value": child},
            )
        return self.create(**option_names(child))

    def _apply(self, schema: Schema[Any], option: str, setting: Any) -> None:
        method = getattr(schema, option)
        try:
            if option in SINGLE_ARGUMENT_OPTIONS:
                method(setting)
            elif setting is None or setting is False:
                return
            elif setting is True:
                method()
            elif isinstance(setting, list):
                method(*setting)
            elif isinstance(setting, Mapping):
                method(**setting)
            else:
                method(setting)
        except TypeError as e:
            raise SchemaConfigError(
                f"Invalid arguments for option '{option}': {e}",
                context={"option": option, "value": setting},
            ) from e


def option_names(config: Mapping[Any, Any]) -> dict[str, Any]:
    """Return ``config`` keyed by option name.

    YAML reads unquoted ``true:`` and ``false:`` keys as booleans; they are
    mapped back to the ``true``/``false`` options. Any other non-string key
    is rejected.

    Raises:
        SchemaConfigError: If a key cannot name an option
    """
    options: dict[str, Any] = {}
    for key, setting in config.items():
        if isinstance(key, bool):
            key = "true" if key else "false"
        elif not isinstance(key, str):
            raise SchemaConfigError(
                f"Option names must be strings, got {key!r}", context={"option": key}
            )
        options[key] = setting
    return options


def load_schema(path: Union[str, Path]) -> Schema[Any]:
    """Build a schema from a YAML or JSON configuration file.

    Args:
        path: Path to a ``.yaml``/``.yml`` or ``.json`` file

    Returns:
        The configured schema

    Raises:
        SchemaConfigError: If the file is missing, has an unsupported format
            or does not contain a mapping
    """
    path = Path(path).resolve()

    if not path.exists():
        raise SchemaConfigError(f"Schema file not found: {path}", context={"path": str(path)})

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise SchemaConfigError(
                f"Unsupported file format: {suffix}", context={"path": str(path)}
            )

    if not isinstance(data, Mapping):
        raise SchemaConfigError(
            f"Schema file must contain a mapping: {path}", context={"path": str(path)}
        )

    logger.info(f"Loading schema from {path}")
    return schema_factory.create(**option_names(data))


# Singleton instance for registration
schema_factory = SchemaFactory()
