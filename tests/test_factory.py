"""
Tests for building schemas from configuration.
"""

import json
import logging
from datetime import datetime, timezone

import pytest
import yaml
from dataknobs_config import FactoryBase

from dataknobs_validator import (
    ArraySchema,
    ConstraintError,
    ObjectSchema,
    SchemaConfigError,
    SchemaFactory,
    StringSchema,
    load_schema,
    schema_factory,
    v,
)
from dataknobs_validator.factory import option_names


class TestSchemaFactory:
    """Test SchemaFactory.create."""

    def test_string_schema(self):
        """Test flags, scalar arguments and transforms."""
        schema = schema_factory.create(type="string", transforms=["trim", "to_lower_case"], min=2, email=True)
        assert isinstance(schema, StringSchema)
        assert schema.validate("  MAIL@TLD.COM ").value == "mail@tld.com"
        assert not schema.validate("x").valid

    def test_argument_forms(self):
        """Test list and mapping arguments."""
        schema = schema_factory.create(
            type="boolean", boolish={"truthy": ["si"], "falsy": ["no"]}, true=True
        )
        assert schema.validate("si").value is True
        assert not schema.validate("no").valid

        schema = schema_factory.create(type="string", alpha=["de-DE"])
        assert schema.config.alpha == "de-DE"

    def test_false_and_none_skip(self):
        """Test disabled options are not applied."""
        schema = schema_factory.create(type="number", integer=False, min=None)
        assert schema.validate(1.5).valid

    def test_modifier_values_are_single_arguments(self):
        """Test default and catch take lists, mappings and None as values."""
        schema = schema_factory.create(type="array", of={"type": "number"}, default=[1, 2])
        assert schema.validate().value == [1, 2]

        schema = schema_factory.create(type="string", catch={"fallback": True})
        assert schema.validate(3).value == {"fallback": True}

        schema = schema_factory.create(type="string", default=None)
        assert schema.validate().valid

    def test_literal_and_enum(self):
        """Test value and values feed the constructors."""
        literal = schema_factory.create(type="literal", value=["a"])
        assert literal.validate(["a"]).valid
        enum = schema_factory.create(type="enum", values=["a", "b"], optional=True)
        assert enum.validate("b").valid
        assert enum.is_optional

    def test_nested_object(self):
        """Test object shapes and array elements are built recursively."""
        schema = schema_factory.create(
            type="object",
            shape={
                "name": {"type": "string", "min": 1},
                "scores": {"type": "array", "of": {"type": "number", "integer": True}, "non_empty": True},
            },
        )
        assert isinstance(schema, ObjectSchema)
        assert isinstance(schema.shape["scores"], ArraySchema)
        result = schema.validate({"name": "a", "scores": [1, 2.5]})
        assert result.errors == ["scores: 1: must be an integer, given was 2.5"]

    def test_shape_accepts_schemas(self):
        """Test built schemas can be mixed into a configuration."""
        schema = schema_factory.create(type="object", shape={"a": v.string()})
        assert schema.validate({"a": "x"}).valid

    def test_date_bounds_from_yaml_dates(self):
        """Test date objects parsed by YAML are valid bounds."""
        config = yaml.safe_load("type: date\nbefore: 2024-01-01\n")
        schema = schema_factory.create(**config)
        assert schema.config.before == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_unknown_option_is_logged(self, caplog):
        """Test unknown options are skipped with a warning."""
        with caplog.at_level(logging.WARNING):
            schema = schema_factory.create(type="number", colour="red")
        assert schema.validate(1).valid
        assert "Unknown option for number schema: colour" in caplog.text

    def test_methods_outside_the_options_are_not_called(self):
        """Test only chainable options are dispatched."""
        schema = schema_factory.create(type="string", validate=True, to_dict=True)
        assert isinstance(schema, StringSchema)

    def test_unknown_type(self):
        """Test an unknown or missing type raises."""
        with pytest.raises(SchemaConfigError) as exc_info:
            schema_factory.create(type="uuid")
        assert "string" in exc_info.value.context["available"]
        with pytest.raises(SchemaConfigError):
            schema_factory.create(min=1)

    def test_missing_structure(self):
        """Test composite and literal kinds need their structural keys."""
        with pytest.raises(SchemaConfigError):
            schema_factory.create(type="object")
        with pytest.raises(SchemaConfigError):
            schema_factory.create(type="array")
        with pytest.raises(SchemaConfigError):
            schema_factory.create(type="array", of="number")
        with pytest.raises(SchemaConfigError):
            schema_factory.create(type="literal")
        with pytest.raises(SchemaConfigError):
            schema_factory.create(type="enum")

    def test_unknown_transform(self):
        """Test transforms must be built-in names."""
        with pytest.raises(SchemaConfigError):
            schema_factory.create(type="string", transforms=["reverse"])
        with pytest.raises(SchemaConfigError):
            schema_factory.create(type="number", transforms=["trim"])

    def test_invalid_arguments_propagate(self):
        """Test configuration errors from chained calls are not hidden."""
        with pytest.raises(ConstraintError):
            schema_factory.create(type="number", min="low")

    def test_argument_shape_mismatch(self):
        """Test settings that do not fit the method signature."""
        with pytest.raises(SchemaConfigError, match="'min'") as exc_info:
            schema_factory.create(type="number", min={"x": 1})
        assert exc_info.value.context == {"option": "min", "value": {"x": 1}}
        with pytest.raises(SchemaConfigError):
            schema_factory.create(type="string", length=[1, 2])

    def test_option_names(self):
        """Test boolean keys map back to option names."""
        assert option_names({True: True, False: None, "coerce": True}) == {
            "true": True,
            "false": None,
            "coerce": True,
        }
        with pytest.raises(SchemaConfigError, match="must be strings"):
            option_names({"type": "number", 3: True})

    def test_factory_instances(self):
        """Test independent factory instances."""
        assert isinstance(schema_factory, SchemaFactory)
        assert isinstance(schema_factory, FactoryBase)
        assert SchemaFactory().create(type="boolean").kind == "boolean"


class TestRoundTrip:
    """Test create(**schema.to_dict()) rebuilds an equivalent schema."""

    @pytest.mark.parametrize("schema", [
        v.string().trim().min(2).postal("US").nullable(),
        v.number().coerce().integer().step(5).catch(0),
        v.boolean().boolish(truthy=["ok"], falsy=["ko"]).false(),
        v.date().after("2020-01-01").before(datetime(2021, 6, 1, 12, tzinfo=timezone.utc)),
        v.enum([1, 2, 3]).default(1),
        v.object({"tags": v.array(v.string()).max(3).optional()}).non_empty(),
    ])
    def test_round_trip(self, schema):
        """Test the rebuilt schema has the same declarative form."""
        rebuilt = schema_factory.create(**schema.to_dict())
        assert type(rebuilt) is type(schema)
        assert rebuilt.to_dict() == schema.to_dict()


class TestLoadSchema:
    """Test loading schema files."""

    def test_yaml_file(self, tmp_path):
        """Test a YAML schema file."""
        path = tmp_path / "user.yaml"
        path.write_text(
            "type: object\n"
            "shape:\n"
            "  name:\n"
            "    type: string\n"
            "    transforms: [trim]\n"
            "  role:\n"
            "    type: enum\n"
            "    values: [admin, user]\n"
            "    default: user\n"
        )
        schema = load_schema(path)
        assert schema.validate({"name": " Ada "}).value == {"name": "Ada", "role": "user"}

    def test_yaml_boolean_option_keys(self, tmp_path):
        """Test unquoted true/false keys select the boolean polarity options."""
        path = tmp_path / "flag.yaml"
        path.write_text("type: boolean\ncoerce: true\ntrue: true\n")
        schema = load_schema(path)
        assert schema.validate("yes").value is True
        assert not schema.validate(0).valid

        nested = tmp_path / "consent.yaml"
        nested.write_text(
            "type: object\n"
            "shape:\n"
            "  accepted:\n"
            "    type: boolean\n"
            "    false: true\n"
        )
        assert load_schema(nested).validate({"accepted": False}).valid
        assert not load_schema(nested).validate({"accepted": True}).valid

    def test_json_file(self, tmp_path):
        """Test a JSON schema file given as a string path."""
        path = tmp_path / "ids.json"
        path.write_text(json.dumps({"type": "array", "of": {"type": "number"}, "max": 2}))
        schema = load_schema(str(path))
        assert not schema.validate([1, 2, 3]).valid

    def test_missing_file(self, tmp_path):
        """Test a missing file raises."""
        with pytest.raises(SchemaConfigError, match="not found"):
            load_schema(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        """Test unknown suffixes raise."""
        path = tmp_path / "schema.toml"
        path.write_text("type = 'string'\n")
        with pytest.raises(SchemaConfigError, match="Unsupported file format"):
            load_schema(path)

    def test_non_mapping_content(self, tmp_path):
        """Test files must contain a mapping."""
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(SchemaConfigError):
            load_schema(path)
