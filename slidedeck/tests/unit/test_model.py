"""Tests for the shared column types."""

from datetime import datetime, timedelta
from datetime import timezone as dt_timezone

import sqlalchemy as sa

from sqlalchemy.dialects import mysql, sqlite
from sqlalchemy.dialects.mysql import LONGTEXT

from slidedeck.common.model import TimeZone, UniversalText
from slidedeck.utils.timezone import timezone


class TestUniversalText:
    """Tests for the long text column type."""

    def test_longtext_on_mysql(self):
        assert isinstance(UniversalText().load_dialect_impl(mysql.dialect()), LONGTEXT)

    def test_text_elsewhere(self):
        impl = UniversalText().load_dialect_impl(sqlite.dialect())

        assert isinstance(impl, sa.Text)
        assert not isinstance(impl, LONGTEXT)


class TestTimeZone:
    """Tests for the timezone-aware datetime type."""

    def test_naive_result_gets_configured_timezone(self):
        value = TimeZone().process_result_value(datetime(2025, 1, 2, 3, 4, 5), sqlite.dialect())

        assert value.tzinfo == timezone.tz_info
        assert (value.hour, value.minute) == (3, 4)

    def test_bind_converts_foreign_offset(self):
        value = datetime(2025, 1, 2, 3, 4, 5, tzinfo=dt_timezone(timedelta(hours=14)))

        bound = TimeZone().process_bind_param(value, sqlite.dialect())

        assert bound == value
        assert bound.tzinfo == timezone.tz_info

    def test_none_passes_through(self):
        assert TimeZone().process_bind_param(None, sqlite.dialect()) is None
        assert TimeZone().process_result_value(None, sqlite.dialect()) is None
