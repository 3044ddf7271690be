import zoneinfo

from datetime import datetime

from slidedeck.core.conf import settings


class TimeZone:
    def __init__(self) -> None:
        self.tz_info = zoneinfo.ZoneInfo(settings.DATETIME_TIMEZONE)

    def now(self) -> datetime:
        """Current time in the configured timezone"""
        return datetime.now(self.tz_info)

    def from_datetime(self, t: datetime) -> datetime:
        """
        Convert a datetime to the configured timezone

        :param t: datetime to convert
        :return:
        """
        return t.astimezone(self.tz_info)


timezone: TimeZone = TimeZone()
