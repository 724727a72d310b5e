"""Tests for raw input decoding."""

from __future__ import annotations

import pytest

from modeterm.domain.models import KeyEvent
from modeterm.host.keys import (
    decode_keys,
    key_from_name,
    split_interrupt,
    split_pending_escape,
    strip_escapes,
)


class TestDecodeKeys:
    def test_printable_and_enter(self) -> None:
        assert list(decode_keys("ab\r")) == [
            KeyEvent.character("a"),
            KeyEvent.character("b"),
            KeyEvent.enter(),
        ]

    def test_crlf_is_one_enter(self) -> None:
        assert list(decode_keys("\r\n")) == [KeyEvent.enter()]

    def test_lone_lf_is_enter(self) -> None:
        assert list(decode_keys("\n")) == [KeyEvent.enter()]

    @pytest.mark.parametrize("data", ["\x7f", "\x08"])
    def test_backspace(self, data: str) -> None:
        assert list(decode_keys(data)) == [KeyEvent.backspace()]

    def test_escape_sequences_ignored(self) -> None:
        assert list(decode_keys("\x1b[A\x1b[1;5Cx\x1bOP")) == [KeyEvent.character("x")]

    def test_other_control_characters_ignored(self) -> None:
        assert list(decode_keys("\t\x00\x07")) == []

    def test_unicode_passes_through(self) -> None:
        assert list(decode_keys("é")) == [KeyEvent.character("é")]


class TestHelpers:
    def test_strip_escapes(self) -> None:
        assert strip_escapes("a\x1b[31mb\x1b[0m") == "ab"

    def test_split_interrupt(self) -> None:
        assert split_interrupt("ab\x03cd") == ("ab", True)
        assert split_interrupt("\x04") == ("", True)
        assert split_interrupt("plain") == ("plain", False)

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("ab\x1b", ("ab", "\x1b")),
            ("ab\x1b[", ("ab", "\x1b[")),
            ("\x1b[1;5", ("", "\x1b[1;5")),
            ("x\x1bO", ("x", "\x1bO")),
            ("\x1b[Ax", ("\x1b[Ax", "")),
            ("\x1b[A\x1b", ("\x1b[A", "\x1b")),
            ("plain", ("plain", "")),
        ],
    )
    def test_split_pending_escape(self, data: str, expected: tuple[str, str]) -> None:
        assert split_pending_escape(data) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Enter", KeyEvent.enter()),
            ("Return", KeyEvent.enter()),
            ("Backspace", KeyEvent.backspace()),
            ("Space", KeyEvent.character(" ")),
            ("a", KeyEvent.character("a")),
            ("A", KeyEvent.character("A")),
            ("-", KeyEvent.character("-")),
        ],
    )
    def test_key_from_name(self, name: str, expected: KeyEvent) -> None:
        assert key_from_name(name) == expected

    @pytest.mark.parametrize("name", ["F13", "Escape", "\x1b", ""])
    def test_unknown_key_names(self, name: str) -> None:
        assert key_from_name(name) is None
