"""
Tests for the payload-building services and timestamp formatting.
"""

from datetime import datetime, timedelta, timezone

from deploy_app.config import Settings
from deploy_app.services import build_app_info, build_greeting, greeting_message, runtime_version
from deploy_app.utils.time import utc_timestamp

NOON = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestUtcTimestamp:
    """Tests for utc_timestamp"""

    def test_formats_with_milliseconds_and_z(self):
        assert utc_timestamp(NOON) == "2025-01-01T12:00:00.000Z"

    def test_truncates_microseconds(self):
        moment = NOON.replace(microsecond=123456)

        assert utc_timestamp(moment) == "2025-01-01T12:00:00.123Z"

    def test_converts_other_timezones_to_utc(self):
        moment = datetime(2025, 1, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))

        assert utc_timestamp(moment) == "2025-01-01T12:00:00.000Z"

    def test_naive_datetime_treated_as_utc(self):
        assert utc_timestamp(datetime(2025, 1, 1, 12, 0, 0)) == "2025-01-01T12:00:00.000Z"

    def test_defaults_to_now(self):
        value = utc_timestamp()

        parsed = datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ").replace(tzinfo=timezone.utc)
        assert abs(datetime.now(timezone.utc) - parsed) < timedelta(minutes=1)


class TestBuildAppInfo:
    """Tests for build_app_info"""

    def test_uses_settings_environment(self):
        info = build_app_info(Settings(environment="staging"), now=NOON)

        assert info.app == "Deploy Test Application"
        assert info.version == "1.0.0"
        assert info.environment == "staging"
        assert info.timestamp == "2025-01-01T12:00:00.000Z"
        assert info.runtime_version == runtime_version()


class TestBuildGreeting:
    """Tests for greeting_message and build_greeting"""

    def test_message_template(self):
        assert greeting_message("Ada") == "Hello, Ada! Welcome."

    def test_name_is_not_escaped(self):
        assert greeting_message('<b>"x"&</b>') == 'Hello, <b>"x"&</b>! Welcome.'

    def test_build_greeting(self):
        greeting = build_greeting("Ada", now=NOON)

        assert greeting.message == "Hello, Ada! Welcome."
        assert greeting.timestamp == "2025-01-01T12:00:00.000Z"
