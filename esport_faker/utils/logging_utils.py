import logging

from esport_faker.utils.time_utils import get_current_time


class TimezoneFormatter(logging.Formatter):
    """Formatter that stamps records with the configured timezone instead of local time."""

    def __init__(self, fmt=None, datefmt=None, tz_name: str = "UTC"):
        super().__init__(fmt, datefmt)
        self.tz_name = tz_name

    def formatTime(self, record, datefmt=None):
        ct = get_current_time(self.tz_name)
        if datefmt:
            s = ct.strftime(datefmt)
        else:
            t = ct.strftime("%Y-%m-%d %H:%M:%S")
            s = "%s,%03d" % (t, record.msecs)
        return s


def configure_logging(level: str = "INFO", tz_name: str = "UTC") -> None:
    """Install a single stream handler on the root logger."""
    formatter = TimezoneFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", tz_name=tz_name)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    root_logger.handlers = [handler]
