"""Tests for the edit-form boundary and TimerConfiguration."""

import pytest

from intervaltimer.timer.edit import (
    EditDraft, parse_field, parse_leading_int, clamp_minutes, clamp_seconds, MAX_MINUTES,
)
from intervaltimer.timer.models import TimerConfiguration


class TestParseField:

    @pytest.mark.parametrize("text, value", [
        ("42", 42),
        ("  7", 7),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("-5", -5),
        ("3.9", 3),
    ])
    def test_parse(self, text, value):
        assert parse_field(text) == value

    def test_none_is_zero(self):
        assert parse_field(None) == 0

    @pytest.mark.parametrize("text, value", [("12abc", 12), ("abc", None), ("", None), (None, None)])
    def test_leading_int(self, text, value):
        assert parse_leading_int(text) == value


class TestClamping:

    @pytest.mark.parametrize("value, expected", [(-1, 0), (0, 0), (30, 30), (59, 59), (60, 59), (99, 59)])
    def test_seconds(self, value, expected):
        assert clamp_seconds(value) == expected

    @pytest.mark.parametrize("value, expected", [(-10, 0), (0, 0), (120, 120), (1000, MAX_MINUTES)])
    def test_minutes(self, value, expected):
        assert clamp_minutes(value) == expected


class TestEditDraft:

    def test_from_configuration(self):
        draft = EditDraft.from_configuration(TimerConfiguration(125, 7))
        assert draft == EditDraft(2, 5, 0, 7)

    def test_set_text_clamps_seconds(self):
        draft = EditDraft()
        assert draft.set_text("main_seconds", "75") == 59
        assert draft.main_seconds == 59

    def test_set_text_non_numeric_is_zero(self):
        draft = EditDraft(main_minutes=3)
        assert draft.set_text("main_minutes", "x") == 0
        assert draft.main_minutes == 0

    def test_set_text_unknown_field(self):
        with pytest.raises(ValueError):
            EditDraft().set_text("colour", "1")

    def test_to_configuration_clamps(self):
        config = EditDraft(-1, 90, 0, -4).to_configuration()
        assert config == TimerConfiguration(59, 0)


class TestTimerConfiguration:

    def test_defaults(self):
        config = TimerConfiguration()
        assert config.main_duration_seconds == 60
        assert config.get_ready_offset_seconds == 5

    def test_from_parts(self):
        assert TimerConfiguration.from_parts(1, 30, 0, 5) == TimerConfiguration(90, 5)

    def test_split_properties(self):
        config = TimerConfiguration(605, 61)
        assert (config.main_minutes, config.main_seconds) == (10, 5)
        assert (config.get_ready_minutes, config.get_ready_seconds) == (1, 1)

    def test_offset_beyond_duration_is_legal(self):
        assert TimerConfiguration(10, 20).get_ready_offset_seconds == 20

    @pytest.mark.parametrize("main, offset", [(-1, 5), (60, -1)])
    def test_negative_rejected(self, main, offset):
        with pytest.raises(ValueError):
            TimerConfiguration(main, offset)

    def test_immutable(self):
        config = TimerConfiguration()
        with pytest.raises(AttributeError):
            config.main_duration_seconds = 10
