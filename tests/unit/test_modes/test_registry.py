"""Tests for the mode registry."""

from __future__ import annotations

import pytest

from modeterm.config.settings import ModeConfig
from modeterm.domain.models import Mode
from modeterm.modes.registry import DEFAULT_MODES, InvalidModeError, ModeRegistry


class TestModeRegistry:
    def test_list_preserves_insertion_order(self, registry: ModeRegistry) -> None:
        assert [m.name for m in registry.list()] == [
            "LAB42",
            "TOP-TRADERS",
            "X-MANAGER",
            "AI-ASSISTANT",
        ]

    def test_list_returns_copy(self, registry: ModeRegistry) -> None:
        modes = registry.list()
        modes.clear()
        assert len(registry) == 4

    @pytest.mark.parametrize("transform", [str.lower, str.upper, str.title, lambda s: s])
    def test_find_any_case(self, registry: ModeRegistry, transform) -> None:
        for mode in registry:
            assert registry.find(transform(mode.name)) is mode

    def test_find_missing_returns_none(self, registry: ModeRegistry) -> None:
        assert registry.find("nonexistent") is None
        assert registry.find("") is None

    def test_find_is_exact_match(self, registry: ModeRegistry) -> None:
        assert registry.find("lab") is None
        assert registry.find("lab42x") is None
        assert registry.find(" lab42 ") is None

    def test_require_raises_invalid_mode(self, registry: ModeRegistry) -> None:
        with pytest.raises(InvalidModeError) as exc_info:
            registry.require("nope")
        assert exc_info.value.mode_name == "nope"
        assert str(exc_info.value) == "invalid mode"

    def test_default_is_first(self, registry: ModeRegistry) -> None:
        assert registry.default is DEFAULT_MODES[0]

    def test_contains(self, registry: ModeRegistry) -> None:
        assert DEFAULT_MODES[2] in registry
        assert Mode(name="OTHER") not in registry

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            ModeRegistry([Mode(name="A"), Mode(name="a")])

    def test_empty_registry_rejected(self) -> None:
        with pytest.raises(ValueError):
            ModeRegistry([])

    def test_from_config(self) -> None:
        registry = ModeRegistry.from_config(
            [
                ModeConfig(name="ALPHA", description="First", color="#112233"),
                ModeConfig(name="BETA", description="Second", color="#445566"),
            ]
        )
        assert [m.name for m in registry] == ["ALPHA", "BETA"]
        assert registry.find("beta").color == "#445566"
