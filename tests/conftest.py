"""Pytest configuration for tests."""

import pytest


@pytest.fixture(scope="session")
def anyio_backend():
    """Configure anyio to use only asyncio backend."""
    return "asyncio"


@pytest.fixture
def four_sentence_text():
    return (
        "Cats sleep a lot during the day. "
        "The main result of the study was clear and simple to read. "
        "Dogs bark at the mailman. "
        "Birds sing in the morning."
    )
