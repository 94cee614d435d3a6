"""Shared fixtures for the calcengine test suite."""

import logging

import pytest

from calcengine.converter import UNIT_CATEGORIES
from calcengine.session import SessionState


@pytest.fixture
def length():
    return UNIT_CATEGORIES["length"]


@pytest.fixture
def temperature():
    return UNIT_CATEGORIES["temperature"]


@pytest.fixture
def celsius(temperature):
    return temperature.find("°C")


@pytest.fixture
def fahrenheit(temperature):
    return temperature.find("°F")


@pytest.fixture
def kelvin(temperature):
    return temperature.find("K")


@pytest.fixture
def state():
    return SessionState()


@pytest.fixture(autouse=True)
def restore_calcengine_logger():
    logger = logging.getLogger("calcengine")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
