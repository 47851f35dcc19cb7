"""Shared test fixtures."""

import logging

import pytest
from fastapi.testclient import TestClient

from swarm_linker.app import app
from swarm_linker.models.linker import LinkerConfig


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def quiet_logger() -> logging.Logger:
    """A logger that discards everything, for injecting into core functions."""
    log = logging.getLogger("swarm_linker.tests.quiet")
    log.addHandler(logging.NullHandler())
    log.propagate = False
    return log


@pytest.fixture
def config() -> LinkerConfig:
    """Linker config with both checks disabled."""
    return LinkerConfig(
        url_prefix="https://swarm.example.com/changes/",
        reviews_api_url="https://swarm.example.com/api/v11/reviews",
        check_url_reachable=False,
        check_review_exists=False,
        p4_user_name="svc-swarm",
        p4_user_ticket="TICKET123",
    )
