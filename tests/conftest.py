import os

import pytest

# Set environment variables for testing before any app imports
os.environ.update({
    "ENVIRONMENT": "test",
    "LOG_LEVEL": "DEBUG",
})

from tests.utils.factories import make_dataset  # noqa: E402


@pytest.fixture()
def sample_dataset():
    return make_dataset({
        1: [("car", "in", 3), ("truck", "out", 2), ("car", "out", 1)],
        2: [("motorcycle", "in", 4), ("car", "in", 5)],
        3: [("truck", "in", 7)],
    })
