"""Unit tests for the demo seed script's engine lifecycle."""

from unittest.mock import AsyncMock

import pytest

from scripts import seed_demo_data


async def test_engine_disposed_when_table_creation_fails(monkeypatch) -> None:
    dispose = AsyncMock()
    monkeypatch.setattr(seed_demo_data, "_load_env", lambda: None)
    monkeypatch.setattr(seed_demo_data, "setup_logging", lambda: None)
    monkeypatch.setattr(
        seed_demo_data, "create_all", AsyncMock(side_effect=RuntimeError("db down"))
    )
    monkeypatch.setattr(seed_demo_data, "dispose_engine", dispose)

    with pytest.raises(RuntimeError, match="db down"):
        await seed_demo_data.run(seed_demo_data.DEFAULT_NUMBER)
    dispose.assert_awaited_once()
