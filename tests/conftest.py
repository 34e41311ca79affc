"""Pytest configuration for atlasclient tests."""

import pytest


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """Create a sleep recorder."""
    return RecordingSleep()


@pytest.fixture(autouse=True)
def reset_client_singleton():
    """Reset the process-wide client before and after each test."""
    import atlasclient.client

    atlasclient.client.reset_atlas_client()

    yield

    atlasclient.client.reset_atlas_client()
