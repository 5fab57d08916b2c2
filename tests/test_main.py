"""
tests/test_main.py

Tests for the application lifespan in todo_gateway/main.py.
"""

from unittest.mock import patch

import pytest

from config import settings
from todo_gateway.main import app, lifespan


@pytest.mark.asyncio
async def test_lifespan_configures_logging_and_seeds_store() -> None:
    """Startup applies the logging settings even when uvicorn imports the app directly."""
    with patch("todo_gateway.main.configure_logging") as mock_configure, patch.object(
        settings, "store_backend", "memory"
    ), patch.object(settings, "seed_sample_data", True):
        async with lifespan(app):
            mock_configure.assert_called_once_with(
                settings.log_level, json_output=settings.log_json
            )
            tasks = await app.state.store.snapshot()

    assert [t.title for t in tasks] == ["Finish Rust project"]
