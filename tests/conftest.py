"""Pytest configuration and shared fixtures for dataknobs_schema tests."""

import pytest

import dataknobs_schema as ds


@pytest.fixture
def password_schema():
    """Password strength schema used by several end-to-end tests."""
    return (
        ds.string()
        .min(8)
        .max(255)
        .regex(r"[A-Z]", "A uppercase letter is required")
        .regex(r"[0-9]", "A number is required")
    )


@pytest.fixture
def user_schema():
    """Nested object schema with scalar, array and object fields."""
    return ds.object({
        "name": ds.string().required().min(3),
        "age": ds.number().integer().nonnegative().optional(),
        "tags": ds.array(ds.string().min(1)).max(3).unique(),
        "address": ds.object({
            "city": ds.string().required(),
            "zip": ds.string().regex(r"^\d{5}$", "Invalid zip code").optional(),
        }).optional(),
    })
