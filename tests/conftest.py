"""
Pytest configuration and shared fixtures for test isolation.
"""
import matplotlib
import pytest

matplotlib.use("Agg")


# Reset global state between tests
@pytest.fixture(autouse=True)
def reset_config():
    """Restore Config to its pre-test values so overrides never leak."""
    from semantic_sphere.config import Config

    snapshot = Config.to_dict()

    yield

    Config.from_dict(snapshot, apply_env_overrides=False)


@pytest.fixture
def journeys():
    """A few sentences covering every abstraction layer."""
    return [
        "The stone became sand became dust became matter",
        "A tree grew in the city",
        "I think the universe is eternal",
        "The team will build a house of wood and glass",
    ]
