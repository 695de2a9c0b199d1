"""Unit tests for hodgepodge.notes.formats."""

import datetime
import threading
import time

import pytest

from hodgepodge.exceptions import DateTimeTextParseError, MalformedLocaleConfigurationError
from hodgepodge.models import LocaleSettings
from hodgepodge.notes.formats import (
    FormatCache,
    build_format_pattern,
    parse_notes_text,
    strip_zone_token,
)

pytestmark = pytest.mark.unit


class TestBuildFormatPattern:
    """Tests for pattern construction from locale settings."""

    def test_us_pattern(self, us_settings):
        assert build_format_pattern(us_settings) == "%m/%d/%Y %I:%M:%S %p"

    def test_german_pattern(self, german_settings):
        assert build_format_pattern(german_settings) == "%d.%m.%Y %H:%M:%S"

    def test_japanese_pattern(self, japanese_settings):
        assert build_format_pattern(japanese_settings) == "%Y-%m-%d %H:%M:%S"

    def test_zone_slot_is_appended_last(self, us_settings, german_settings):
        assert build_format_pattern(us_settings, with_zone=True) == "%m/%d/%Y %I:%M:%S %p %Z"
        assert build_format_pattern(german_settings, with_zone=True) == "%d.%m.%Y %H:%M:%S %Z"

    def test_percent_separator_is_escaped(self):
        settings = LocaleSettings.from_order("MDY", date_sep="%", is_time_24_hour=True)

        assert build_format_pattern(settings) == "%m%%%d%%%Y %H:%M:%S"

    def test_am_pm_labels_do_not_change_pattern(self, us_settings):
        custom = LocaleSettings.from_order(
            "MDY", is_time_24_hour=False, am_string="vorm.", pm_string="nachm."
        )

        assert build_format_pattern(custom) == build_format_pattern(us_settings)

    @pytest.mark.parametrize(
        ("ymd", "dmy", "mdy"),
        [
            (False, False, False),
            (True, True, False),
            (True, False, True),
            (True, True, True),
        ],
    )
    def test_malformed_date_order_raises(self, ymd, dmy, mdy):
        settings = LocaleSettings(is_date_ymd=ymd, is_date_dmy=dmy, is_date_mdy=mdy)

        with pytest.raises(MalformedLocaleConfigurationError):
            build_format_pattern(settings)


class TestParsing:
    """Tests for zone stripping and text parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("10/9/2018 11:10:09 PM MST", "10/9/2018 11:10:09 PM"),
            ("8.9.2018 09:42:55 CET", "8.9.2018 09:42:55"),
            ("  2018-10-10 06:10:09 GMT  ", "2018-10-10 06:10:09"),
            ("nospace", "nospace"),
        ],
    )
    def test_strip_zone_token(self, text, expected):
        assert strip_zone_token(text) == expected

    def test_parses_unpadded_us_rendering(self, us_settings):
        pattern = build_format_pattern(us_settings)

        parsed = parse_notes_text("10/9/2018 11:10:09 PM", pattern)

        assert parsed == datetime.datetime(2018, 10, 9, 23, 10, 9)
        assert parsed.tzinfo is None

    def test_parses_german_rendering(self, german_settings):
        pattern = build_format_pattern(german_settings)

        assert parse_notes_text("8.9.2018 09:42:55", pattern) == datetime.datetime(
            2018, 9, 8, 9, 42, 55
        )

    def test_parses_percent_separated_rendering(self):
        settings = LocaleSettings.from_order("MDY", date_sep="%", is_time_24_hour=True)

        parsed = parse_notes_text("2%29%2000 23:59:59", build_format_pattern(settings))

        assert parsed == datetime.datetime(2000, 2, 29, 23, 59, 59)

    def test_mismatch_raises_parse_error(self, us_settings):
        pattern = build_format_pattern(us_settings)

        with pytest.raises(DateTimeTextParseError) as exc_info:
            parse_notes_text("8.9.2018 09:42:55", pattern)

        assert exc_info.value.text == "8.9.2018 09:42:55"
        assert exc_info.value.pattern == pattern
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestFormatCache:
    """Tests for lazy, single build of the cached pattern."""

    def test_builds_on_first_use_and_reuses(self, us_settings, german_settings):
        cache = FormatCache()
        assert not cache.is_built

        first = cache.get_pattern(lambda: us_settings)
        second = cache.get_pattern(lambda: german_settings)

        assert cache.is_built
        assert first == second == "%m/%d/%Y %I:%M:%S %p"

    def test_settings_are_not_loaded_once_built(self, us_settings):
        cache = FormatCache()
        cache.get_pattern(lambda: us_settings)

        def fail():
            raise AssertionError("settings loaded twice")

        assert cache.get_pattern(fail) == "%m/%d/%Y %I:%M:%S %p"

    def test_concurrent_first_use_builds_once(self, us_settings):
        cache = FormatCache()
        calls = []
        results = []
        start = threading.Event()

        def load_settings():
            calls.append(1)
            time.sleep(0.05)
            return us_settings

        def worker():
            start.wait()
            results.append(cache.get_pattern(load_settings))

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        start.set()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert results == ["%m/%d/%Y %I:%M:%S %p"] * 16

    def test_prime_and_reset(self, german_settings):
        cache = FormatCache()

        cache.prime("%Y-%m-%d %H:%M:%S")
        assert cache.get_pattern(lambda: german_settings) == "%Y-%m-%d %H:%M:%S"

        cache.reset()
        assert not cache.is_built
        assert cache.get_pattern(lambda: german_settings) == "%d.%m.%Y %H:%M:%S"

    def test_constructor_seeds_pattern(self):
        assert FormatCache("%H:%M:%S").is_built
