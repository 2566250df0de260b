"""
Tests for the modifier pipeline shared by every schema.
"""

import pytest

from dataknobs_validator import UNDEFINED, Modifiers, ValidationResult, v


class TestNullable:
    """Test nullable() handling."""

    def test_nullable_accepts_none(self):
        """Test None is accepted for every schema kind."""
        schemas = [
            v.string(), v.number(), v.boolean(), v.date(),
            v.literal("x"), v.enum(["a"]), v.object({}), v.array(v.string()),
        ]
        for schema in schemas:
            result = schema.nullable().validate(None)
            assert result.valid, schema
            assert result.value is None

    def test_nullable_does_not_accept_undefined(self):
        """Test an absent value still reaches the type check."""
        result = v.string().nullable().validate()
        assert not result.valid
        assert result.errors == ["must be a string, given was undefined"]

        assert not v.number().nullable().validate(UNDEFINED).valid


class TestNullish:
    """Test nullish() handling."""

    def test_nullish_accepts_both(self):
        """Test None and UNDEFINED resolve to None."""
        schema = v.number().nullish()
        assert schema.validate(None) == ValidationResult.success(None)
        assert schema.validate() == ValidationResult.success(None)

    def test_nullish_keeps_type_checks(self):
        """Test present values are still validated."""
        assert not v.number().nullish().validate("3").valid


class TestDefault:
    """Test default() handling."""

    def test_default_wins_over_everything(self):
        """Test default beats nullish, nullable, catch and optional."""
        schema = v.string().default("d").nullish()
        assert schema.validate() == ValidationResult.success("d")

        schema = v.string().nullable().nullish().optional().default("d")
        assert schema.validate(None).value == "d"
        assert schema.validate(UNDEFINED).value == "d"

    def test_default_only_for_absent_input(self):
        """Test default does not rescue invalid input."""
        result = v.string().default("d").validate(42)
        assert not result.valid

    def test_default_none(self):
        """Test None is a usable default."""
        result = v.string().default(None).validate()
        assert result.valid
        assert result.value is None


class TestCatch:
    """Test catch() handling."""

    def test_catch_recovers_failed_input(self):
        """Test a failed constraint falls back to the catch value."""
        assert v.number().min(10).catch(0).validate(5) == ValidationResult.success(0)

    def test_catch_recovers_absent_input(self):
        """Test absent input falls back to the catch value."""
        assert v.number().catch(0).validate() == ValidationResult.success(0)

    def test_nullable_beats_catch_for_none(self):
        """Test the more specific nullable policy wins first."""
        schema = v.number().nullable().catch(7)
        assert schema.validate(None).value is None
        assert schema.validate(UNDEFINED).value == 7

    def test_catch_beats_optional(self):
        """Test catch is checked before optional."""
        schema = v.number().optional().catch(-1)
        assert schema.validate("bad").value == -1
        assert schema.validate().value == -1

    def test_default_catch_alias(self):
        """Test default_catch is the same as catch."""
        assert v.string().default_catch("x").validate(1).value == "x"


class TestOptional:
    """Test optional() handling."""

    def test_optional_absent(self):
        """Test absent input resolves to UNDEFINED."""
        result = v.string().optional().validate()
        assert result.valid
        assert result.value is UNDEFINED

    def test_optional_invalid(self):
        """Test invalid input resolves to UNDEFINED."""
        result = v.string().min(3).optional().validate("ab")
        assert result.valid
        assert result.value is UNDEFINED

    def test_optional_valid(self):
        """Test valid input is returned unchanged."""
        assert v.string().optional().validate("abc").value == "abc"

    def test_is_optional(self):
        """Test the is_optional property."""
        assert v.string().optional().is_optional
        assert not v.string().is_optional


class TestModifiersConfig:
    """Test the frozen Modifiers snapshot."""

    def test_chaining_returns_same_instance(self):
        """Test chained calls mutate and return the same schema."""
        schema = v.string()
        assert schema.nullable() is schema
        assert schema.default("x") is schema

    def test_snapshot_is_replaced(self):
        """Test each chained call swaps in a new frozen snapshot."""
        schema = v.string()
        before = schema.modifiers
        schema.nullable()
        assert before.nullable is False
        assert schema.modifiers.nullable is True
        with pytest.raises(AttributeError):
            schema.modifiers.nullable = False

    def test_last_fallback_wins(self):
        """Test default and catch share one fallback value."""
        schema = v.number().default(1).catch(2)
        assert schema.modifiers.has_default and schema.modifiers.has_catch
        assert schema.validate().value == 2
        assert schema.validate("bad").value == 2

    def test_pre_check_passes_present_values(self):
        """Test pre_check only handles absent input."""
        assert Modifiers(has_default=True, fallback=1).pre_check(0) is None
        assert Modifiers().pre_check(None) is None

    def test_post_check(self):
        """Test post_check leaves successes alone."""
        ok = ValidationResult.success(1)
        assert Modifiers(has_catch=True, fallback=0).post_check(ok) is ok
        failed = ValidationResult.failure("x")
        assert Modifiers().post_check(failed) is failed

    def test_to_dict(self):
        """Test the declarative form of modifiers."""
        schema = v.string().nullable().default("x").optional()
        assert schema.modifiers.to_dict() == {"nullable": True, "default": "x", "optional": True}


class TestIdempotence:
    """Test validation does not change schema state."""

    def test_repeated_validation(self, user_schema):
        """Test the same input always yields an equal result."""
        data = {"name": "  Ada ", "age": 36, "extra": True}
        first = user_schema.validate(data)
        assert user_schema.validate(data) == first
        assert user_schema.validate(data) == first
        assert data == {"name": "  Ada ", "age": 36, "extra": True}
