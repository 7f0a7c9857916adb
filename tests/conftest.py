import pytest

from solid_exercises.infrastructure.service_container import ServiceContainer


@pytest.fixture(autouse=True)
def reset_container():
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()
