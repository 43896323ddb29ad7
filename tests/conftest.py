"""
Pytest configuration and shared fixtures.
Pages are built in memory and served through a patched ``requests.get``.
"""

import sys
from pathlib import Path

import pytest
import requests

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

WEEKDAYS = ["Ma", "Ti", "Ke", "To", "Pe", "La", "Su"]
SLOT_LABELS = ["Aamiainen", "Lounas", "Päivällinen", "Iltapala"]


def build_menu_page(anchor, meals=None, encoding="iso-8859-1"):
    """Render a menu page in the upstream table shape.

    ``meals`` maps a slot label to seven cell texts; missing slots get
    ``"<label> <weekday>"`` placeholders.
    """
    meals = meals or {}
    rows = [
        f"<tr><td>Ruokalista</td><td>{anchor}</td></tr>",
        "<tr><td></td>" + "".join(f"<td>{day}</td>" for day in WEEKDAYS) + "</tr>",
    ]
    for label in SLOT_LABELS:
        cells = meals.get(label) or [f"{label} {day}" for day in WEEKDAYS]
        rows.append(f"<tr><td>{label}</td>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>")

    html = (
        "<html><head><meta charset=\"iso-8859-1\"></head><body>"
        "<table>" + "".join(rows) + "</table>"
        "<table><tr><td>footer</td></tr></table>"
        "</body></html>"
    )
    return html.encode(encoding)


class FakeResponse:
    def __init__(self, url, content, status_code=200):
        self.url = url
        self.content = content
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@pytest.fixture
def menu_page():
    return build_menu_page


@pytest.fixture
def serve_pages(monkeypatch):
    """Patch ``requests.get`` to answer from a ``{url: bytes or status}`` map."""
    responses = []

    def install(pages):
        def fake_get(url, timeout=None):
            page = pages[url]
            if isinstance(page, Exception):
                raise page
            if isinstance(page, int):
                response = FakeResponse(url, b"", status_code=page)
            else:
                response = FakeResponse(url, page)
            responses.append(response)
            return response

        monkeypatch.setattr("lionsmeal.get_menu.requests.get", fake_get)
        return responses

    return install


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the developer's environment and project ``.env`` out of the tests."""
    for name in (
        "LIONSMEAL_URLS",
        "LIONSMEAL_ENCODING",
        "LIONSMEAL_DATE_FORMAT",
        "LIONSMEAL_TIMEOUT",
        "LIONSMEAL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("lionsmeal.config.ENV_PATH", str(tmp_path / ".env"))
    return tmp_path / ".env"
