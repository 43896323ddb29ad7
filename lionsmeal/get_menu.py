import logging

import requests
from bs4 import BeautifulSoup

from .dates import WeekRange
from .exceptions import EncodingError, FetchError
from .grid import DEFAULT_LAYOUT, extract_anchor_text, extract_meal_grid, table_rows
from .records import assemble_week


logger = logging.getLogger(__name__)

CURRENT_WEEK_URL = "http://www.leijonacatering.fi/ruokalista_varuskunta.php"
NEXT_WEEK_URL = "http://www.leijonacatering.fi/ruokalista_varuskunta_seur.php"
DEFAULT_URLS = (CURRENT_WEEK_URL, NEXT_WEEK_URL)
SOURCE_ENCODING = "iso-8859-1"


class MenuScraper:
    def __init__(self, url, encoding=SOURCE_ENCODING, layout=DEFAULT_LAYOUT, timeout=None):
        self.url = url
        self.encoding = encoding
        self.layout = layout
        self.timeout = timeout
        self._soup = None

    def get_html(self):
        logger.info("Fetching %s", self.url)
        try:
            with requests.get(self.url, timeout=self.timeout) as response:
                response.raise_for_status()
                body = response.content
        except requests.RequestException as exc:
            raise FetchError(self.url, exc) from exc
        return self.transcode(body)

    def transcode(self, body):
        try:
            return body.decode(self.encoding)
        except LookupError as exc:
            raise EncodingError(f"Unknown source encoding {self.encoding!r}") from exc
        except UnicodeDecodeError as exc:
            raise EncodingError(f"{self.url} is not valid {self.encoding}: {exc}") from exc

    def get_soup(self):
        if self._soup is None:
            self._soup = BeautifulSoup(self.get_html(), "html.parser")
        return self._soup

    def get_rows(self):
        return table_rows(self.get_soup())

    def get_week(self):
        anchor = extract_anchor_text(self.get_rows(), self.layout)
        return WeekRange.from_anchor(anchor)

    def get_grid(self):
        return extract_meal_grid(self.get_rows(), self.layout)

    def get_days(self):
        week = self.get_week()
        days = assemble_week(week, self.get_grid())
        logger.info("Parsed %s: %s - %s", self.url, week.start.date(), week.end.date())
        return days


def collect_menus(urls=DEFAULT_URLS, **scraper_options):
    """Scrape each page in turn and concatenate their days in page order."""
    days = []
    for url in urls:
        days.extend(MenuScraper(url, **scraper_options).get_days())
    return days
