"""
Tests for ObjectSchema.
"""

from collections import OrderedDict

import pytest

from dataknobs_validator import UNDEFINED, ConstraintError, ValidationResult, v


class TestObjectType:
    """Test input type handling."""

    def test_rejects_non_mappings(self):
        """Test lists, strings and None are rejected outright."""
        schema = v.object({"a": v.string()})
        assert schema.validate([("a", "x")]).errors == [
            "must be an object, given was [('a', 'x')] of type list"
        ]
        assert not schema.validate("a").valid
        assert not schema.validate(None).valid

    def test_accepts_any_mapping(self):
        """Test mapping types other than dict."""
        result = v.object({"a": v.string()}).validate(OrderedDict(a="x"))
        assert result.value == {"a": "x"}
        assert type(result.value) is dict


class TestObjectShape:
    """Test per-key validation."""

    def test_allow_list(self):
        """Test unknown keys are dropped without an error."""
        result = v.object({"a": v.string()}).validate({"a": "x", "b": "y"})
        assert result == ValidationResult.success({"a": "x"})

    def test_optional_key_is_omitted(self):
        """Test a missing optional key leaves no slot."""
        result = v.object({"a": v.string().optional()}).validate({})
        assert result == ValidationResult.success({})

    def test_invalid_optional_key_is_omitted(self):
        """Test an invalid optional key is dropped silently."""
        schema = v.object({"a": v.string(), "b": v.number().optional()})
        assert schema.validate({"a": "x", "b": "nope"}).value == {"a": "x"}

    def test_missing_required_key(self):
        """Test missing keys are validated as undefined."""
        result = v.object({"a": v.string()}).validate({})
        assert result.errors == ["a: must be a string, given was undefined"]

    def test_defaults_fill_missing_keys(self):
        """Test default() supplies absent keys."""
        schema = v.object({"role": v.string().default("user"), "note": v.string().nullish()})
        assert schema.validate({}).value == {"role": "user", "note": None}

    def test_errors_in_shape_order(self):
        """Test one aggregated entry per failing key, in shape order."""
        schema = v.object({
            "name": v.string().min(3),
            "age": v.number(),
            "ok": v.boolean(),
        })
        result = schema.validate({"name": "Al", "age": "x", "ok": True})
        assert result.errors == [
            "name: must be a string with 3 or more characters, given was a length of 2",
            "age: must be a number, given was str",
        ]
        assert result.value is None

    def test_nested_errors(self, user_schema):
        """Test nested failures are prefixed with each key."""
        schema = v.object({"user": user_schema})
        result = schema.validate({"user": {"name": "A", "age": -1}})
        assert result.errors == [
            "user: name: must be a string with 2 or more characters, given was a length of 1, "
            "age: must be greater than or equal 0, given was -1"
        ]

    def test_nested_success(self, user_schema):
        """Test nested values are normalized."""
        result = user_schema.validate({
            "name": " Ada ",
            "age": 36,
            "email": "not-an-email",
            "tags": ["math"],
        })
        assert result.value == {"name": "Ada", "age": 36, "tags": ["math"]}

    def test_optional_value_none_is_kept(self):
        """Test a child resolving to None is not omitted."""
        schema = v.object({"a": v.string().nullable().optional()})
        assert schema.validate({"a": None}).value == {"a": None}

    def test_shared_child_schema(self):
        """Test one child schema reused under several keys."""
        word = v.string().min(1)
        schema = v.object({"first": word, "last": word})
        assert schema.validate({"first": "a", "last": "b"}).valid

    def test_invalid_shape(self):
        """Test shape entries must be schemas."""
        with pytest.raises(ConstraintError):
            v.object({"a": str})
        with pytest.raises(ConstraintError):
            v.object([v.string()])

    def test_shape_is_read_only(self):
        """Test the shape cannot be changed after construction."""
        schema = v.object({"a": v.string()})
        with pytest.raises(TypeError):
            schema.shape["b"] = v.string()


class TestObjectNonEmpty:
    """Test non_empty()."""

    def test_empty_input(self):
        """Test the pre-check on the input."""
        result = v.object({"a": v.string().optional()}).non_empty().validate({})
        assert result.errors == [
            "must be an object with at least one key-value pair, given was an empty object"
        ]

    def test_empty_result(self):
        """Test the post-check on the validated result."""
        schema = v.object({"a": v.string().optional()}).non_empty()
        result = schema.validate({"b": 1})
        assert result.errors == [
            "must be an object with at least one valid key-value pair, "
            "during validation the object became empty"
        ]

    def test_non_empty_success(self):
        """Test a surviving key passes."""
        schema = v.object({"a": v.string().optional()}).non_empty()
        assert schema.validate({"a": "x"}).value == {"a": "x"}

    def test_optional_object(self):
        """Test an optional object resolves to undefined on failure."""
        schema = v.object({"a": v.string()}).optional()
        assert schema.validate({}).value is UNDEFINED

    def test_to_dict(self):
        """Test the declarative form nests child schemas."""
        schema = v.object({"a": v.string().optional(), "b": v.number().min(1)}).non_empty()
        assert schema.to_dict() == {
            "type": "object",
            "shape": {
                "a": {"type": "string", "optional": True},
                "b": {"type": "number", "min": 1},
            },
            "non_empty": True,
        }
