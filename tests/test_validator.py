"""Tests for the dataknobs_validator package surface."""

import dataknobs_validator
from dataknobs_validator import (
    ArraySchema,
    BooleanSchema,
    DateSchema,
    EnumSchema,
    LiteralSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    Validator,
    v,
)


def test_import():
    """Test that the package can be imported."""
    assert dataknobs_validator.__version__ == "0.2.0"
    for name in dataknobs_validator.__all__:
        assert hasattr(dataknobs_validator, name), name


def test_constructors():
    """Test each constructor returns a fresh schema of its kind."""
    assert v is Validator
    assert isinstance(v.string(), StringSchema)
    assert isinstance(v.number(), NumberSchema)
    assert isinstance(v.boolean(), BooleanSchema)
    assert isinstance(v.date(), DateSchema)
    assert isinstance(v.literal(1), LiteralSchema)
    assert isinstance(v.enum([1]), EnumSchema)
    assert isinstance(v.object({}), ObjectSchema)
    assert isinstance(v.array(v.string()), ArraySchema)
    assert v.string() is not v.string()


def test_repr():
    """Test schemas render their declarative form."""
    assert repr(v.number().min(1)) == "NumberSchema({'type': 'number', 'min': 1})"


def test_readme_example():
    """Test the nested example from the README."""
    user = v.object({
        "name": v.string().trim().min(2).max(50),
        "email": v.string().trim().to_lower_case().email(),
        "age": v.number().coerce().integer().min(0).optional(),
        "newsletter": v.boolean().boolish().default(False),
        "tags": v.array(v.string().non_empty()).max(10).optional(),
    })
    result = user.validate({"name": " Ada ", "email": "ADA@EXAMPLE.ORG", "age": "36"})
    assert result.value == {
        "name": "Ada",
        "email": "ada@example.org",
        "age": 36,
        "newsletter": False,
    }
