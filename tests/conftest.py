"""
Root conftest.py — shared fixtures and helpers for the entire test suite.

Provides:
- EquipmentProvider / ExchangeInfo factory helpers
- ExchangePage factory and a result-page HTML builder shaped like
  adsl2exchanges.com.au's answer page
- Mock gateway / parser fixtures (for use-case tests)
"""

import os
from typing import List, Optional, Sequence, Tuple
from unittest.mock import MagicMock

import pytest

from adsllookup.domain.entities.exchange_info import EquipmentProvider, ExchangeInfo
from adsllookup.domain.interfaces.i_exchange_gateway import ExchangePage


# ─────────────────────────────────────────────────────────────────────────────
# Markers
# ─────────────────────────────────────────────────────────────────────────────


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "live: hits adsl2exchanges.com.au (set ADSL_LIVE_TESTS=1 to run)"
    )


def pytest_collection_modifyitems(config, items):
    if os.getenv("ADSL_LIVE_TESTS") == "1":
        return
    skip_live = pytest.mark.skip(reason="live lookup tests disabled (ADSL_LIVE_TESTS!=1)")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


# ─────────────────────────────────────────────────────────────────────────────
# Domain object factories
# ─────────────────────────────────────────────────────────────────────────────


def make_provider(
    name: str = "Telstra",
    status: str = "Active",
    estimate: str = "Available now",
    available: bool = True,
) -> EquipmentProvider:
    """Create an EquipmentProvider with sensible test defaults."""
    return EquipmentProvider(
        name=name,
        status=status,
        estimate=estimate,
        available=available,
    )


def make_exchange_info(
    exchange: str = "Homebush",
    zone: int = 1,
    distance: float = 1234.5,
    cable_length: float = 1580.0,
    estimated_speed: int = 12000,
    nbn_available: bool = False,
    providers: Optional[List[EquipmentProvider]] = None,
) -> ExchangeInfo:
    """Create an ExchangeInfo with sensible test defaults."""
    return ExchangeInfo(
        exchange=exchange,
        zone=zone,
        distance=distance,
        cable_length=cable_length,
        estimated_speed=estimated_speed,
        nbn_available=nbn_available,
        providers=providers if providers is not None else [make_provider()],
    )


# ─────────────────────────────────────────────────────────────────────────────
# Result page builders
# ─────────────────────────────────────────────────────────────────────────────

ProviderRow = Tuple[str, str, str, str]  # name, status, estimate, availability text

DEFAULT_PROVIDER_ROWS: List[ProviderRow] = [
    ("Telstra", "Active", "Available now", "Yes"),
    ("iiNet", "Active", "Available now", "Yes"),
    ("Optus", "Planned", "Q3 2014", "No"),
]


def build_summary(
    distance: str = "1234.5",
    exchange: str = "Homebush",
    cable_length: str = "1580",
    speed: str = "12000",
    zone: str = "1",
) -> str:
    return (
        f"You are {distance} m from {exchange} as the crow flies.<br>"
        f"Estimated cable length of {cable_length} m.<br>"
        f"Estimated speed of {speed}<br>"
        f"Zone {zone}<br>"
    )


def build_nbn_table(cells: Sequence[str] = ("NO",)) -> str:
    rows = "".join(f"<tr><td>{text}</td></tr>" for text in cells)
    return (
        '<div id="nbnenabled">'
        '<table id="sample">'
        "<thead><tr><th>NBN Enabled</th></tr></thead>"
        f"<tbody>{rows}</tbody>"
        "</table>"
        "</div>"
    )


def build_provider_row(row: ProviderRow) -> str:
    cells = "".join(f"<td>{text}</td>" for text in row)
    return f'<tr class="main"><td><img src="logo.gif"></td>{cells}</tr>'


def build_providers_table(
    rows: Optional[Sequence[ProviderRow]] = None,
    raw_rows: Optional[Sequence[str]] = None,
) -> str:
    """
    Header row first, then provider rows separated by spacer rows, so the
    provider rows sit at odd indices like they do on the live page.
    """
    if raw_rows is None:
        rows = DEFAULT_PROVIDER_ROWS if rows is None else rows
        raw_rows = ['<tr class="header"><td></td><td>Provider</td></tr>']
        for i, row in enumerate(rows):
            if i:
                raw_rows.append('<tr class="spacer"><td colspan="5"></td></tr>')
            raw_rows.append(build_provider_row(row))
    return (
        '<div id="eproviders">'
        '<table id="sample">'
        f"<tbody>{''.join(raw_rows)}</tbody>"
        "</table>"
        "</div>"
    )


def build_result_html(
    summary: Optional[str] = None,
    nbn_table: Optional[str] = None,
    providers_table: Optional[str] = None,
) -> str:
    summary = build_summary() if summary is None else summary
    nbn_table = build_nbn_table() if nbn_table is None else nbn_table
    providers_table = build_providers_table() if providers_table is None else providers_table
    return (
        "<html><head>"
        "<style>"
        f'#exchangeinfo:after {{ content: "{summary}"; }}'
        "</style>"
        "</head><body>"
        '<div id="exchangeinfo"></div>'
        f"{nbn_table}"
        f"{providers_table}"
        "</body></html>"
    )


def make_page(
    path: str = "/addresslookup.php",
    html: Optional[str] = None,
    status_code: int = 200,
) -> ExchangePage:
    return ExchangePage(
        path=path,
        html=build_result_html() if html is None else html,
        url=f"http://www.adsl2exchanges.com.au{path}",
        status_code=status_code,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Mock gateway fixtures (inject into use-case tests)
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_gateway():
    """MagicMock for IExchangeGateway. Defaults to a resolved result page."""
    mock = MagicMock()
    mock.fetch_page.return_value = make_page()
    return mock


@pytest.fixture
def mock_parser():
    """MagicMock for IPageParser. Defaults to a populated ExchangeInfo."""
    mock = MagicMock()
    mock.parse.return_value = make_exchange_info()
    return mock


@pytest.fixture
def result_html():
    """A complete, well-formed result page."""
    return build_result_html()
