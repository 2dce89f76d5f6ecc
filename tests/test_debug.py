"""
Tests for mc_connect4.debug
"""

import pytest

from mc_connect4.debug import DebugLevel, DebugManager


@pytest.fixture
def manager() -> DebugManager:
    """Manager on its own logger so the shared singleton stays untouched."""
    return DebugManager(name="mc_connect4.test")


class TestLevels:
    """Level and component filtering tests."""

    def test_default_level(self, manager: DebugManager):
        assert manager.level == DebugLevel.WARNING
        assert manager.is_enabled_for(DebugLevel.ERROR)
        assert not manager.is_enabled_for(DebugLevel.INFO)

    def test_none_silences_everything(self, manager: DebugManager):
        manager.configure(level=DebugLevel.NONE)
        assert not manager.is_enabled_for(DebugLevel.ERROR)

    def test_component_filter(self, manager: DebugManager):
        manager.configure(level=DebugLevel.TRACE, components=["rollout"])
        assert manager.is_enabled_for(DebugLevel.TRACE, "rollout")
        assert not manager.is_enabled_for(DebugLevel.TRACE, "engine")

    def test_disabled(self, manager: DebugManager):
        manager.configure(enabled=False)
        assert not manager.is_enabled_for(DebugLevel.ERROR)

    def test_set_from_string(self, manager: DebugManager):
        assert manager.set_from_string("Debug")
        assert manager.level == DebugLevel.DEBUG
        assert not manager.set_from_string("verbose")
        assert manager.level == DebugLevel.DEBUG


class TestOutput:
    """Handler and timer tests."""

    def test_file_logging(self, manager: DebugManager, tmp_path):
        log_file = tmp_path / "engine.log"
        manager.configure(level=DebugLevel.INFO, log_file=str(log_file))
        manager.info("selected column 3", "engine")
        manager.configure(log_file="")
        assert "[engine] selected column 3" in log_file.read_text()

    def test_timer(self, manager: DebugManager):
        manager.start_timer("rollouts")
        elapsed = manager.end_timer("rollouts")
        assert elapsed is not None and elapsed >= 0

    def test_unknown_timer(self, manager: DebugManager):
        assert manager.end_timer("missing") is None
