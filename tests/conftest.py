"""Shared pytest fixtures for modelme tests."""

from datetime import datetime, timezone

import pytest

from modelme import Model, configure_logging, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True, scope="session")
def _logging():
    configure_logging(level="warning")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def model() -> Model:
    return Model()


@pytest.fixture
def person_model() -> Model:
    """Person{name, age, created} without nesting."""
    model = Model()
    person = model.type("Person")
    person.field("name", "string", {"minLength": 1, "maxLength": 20})
    person.field("age", "int", {"min": 0, "max": 200})
    person.field("created", "datetime", {"defaultValue": utcnow})
    return model


@pytest.fixture
def simple_array_model() -> Model:
    model = Model()
    person = model.type("Person")
    person.field("name", "string", {"minLength": 1, "maxLength": 20})
    person.field("favoriteNumbers", "array", {
        "elementType": {"mode": "simple", "type": "int"},
        "defaultValue": [],
    })
    return model


@pytest.fixture
def recursive_model() -> Model:
    """Person whose friends are Persons."""
    model = Model()
    person = model.type("Person")
    person.field("name", "string", {"minLength": 1, "maxLength": 20})
    person.field("age", "int", {"min": 0, "max": 200})
    person.field("created", "datetime", {"defaultValue": utcnow})
    person.field("friends", "array", {
        "elementType": {"mode": "complex", "type": "Person"},
        "defaultValue": [],
    })
    return model
