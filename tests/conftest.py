import pytest

from codepoint_core.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    configure_logging("warning")
