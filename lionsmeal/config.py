import logging
import math
import os

from dotenv import load_dotenv

from .get_menu import DEFAULT_URLS, SOURCE_ENCODING
from .records import DateFormat


CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
ENV_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", ".env"))


class Config:
    def __init__(self, env_path=None):
        load_dotenv(env_path or ENV_PATH)

        raw_urls = os.getenv("LIONSMEAL_URLS")
        if raw_urls:
            self.urls = tuple(url.strip() for url in raw_urls.split(",") if url.strip())
        else:
            self.urls = DEFAULT_URLS
        self.encoding = os.getenv("LIONSMEAL_ENCODING") or SOURCE_ENCODING

        raw_format = (os.getenv("LIONSMEAL_DATE_FORMAT") or DateFormat.EPOCH.value).strip().lower()
        try:
            self.date_format = DateFormat(raw_format)
        except ValueError:
            raise ValueError(f"LIONSMEAL_DATE_FORMAT must be one of: {', '.join(f.value for f in DateFormat)}") from None

        raw_timeout = os.getenv("LIONSMEAL_TIMEOUT")
        self.timeout = float(raw_timeout) if raw_timeout else None
        if self.timeout is not None and not (math.isfinite(self.timeout) and self.timeout > 0):
            raise ValueError(f"LIONSMEAL_TIMEOUT must be a positive number of seconds, got {raw_timeout!r}")

        self.log_level = (os.getenv("LIONSMEAL_LOG_LEVEL") or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown LIONSMEAL_LOG_LEVEL: {self.log_level}")

        if not self.urls:
            raise ValueError("LIONSMEAL_URLS does not contain any URL")

    def scraper_options(self):
        return {"encoding": self.encoding, "timeout": self.timeout}
