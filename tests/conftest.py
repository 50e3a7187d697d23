import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any configure_logging() call so debug events stay capturable."""
    yield
    structlog.reset_defaults()
