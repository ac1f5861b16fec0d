import pytest


@pytest.fixture
def anyio_backend():
    # The application code is built on asyncio
    return "asyncio"
