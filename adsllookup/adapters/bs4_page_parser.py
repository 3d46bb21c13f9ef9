"""
BS4PageParser - Implements IPageParser.
Reads the adsl2exchanges.com.au result page with a regex over the raw body
(the exchange summary lives inside a CSS `content:` string, not the DOM)
and BeautifulSoup for the NBN and equipment provider tables.

Everything here is coupled to the site's current layout. A layout change
surfaces as ExtractionError; no attempt is made to recover from one.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Pattern

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..domain.entities.exchange_info import (
    EquipmentProvider,
    ExchangeInfo,
    convert_primary_fields,
)
from ..domain.errors import ExtractionError
from ..domain.interfaces.i_page_parser import IPageParser

logger = logging.getLogger(__name__)

PRIMARY_FIELDS_PATTERN = re.compile(
    r"You are (?P<distance>[\d.]+) m from (?P<exchange>.*?) as the crow flies\.<br>"
    r"Estimated cable length of (?P<cablelength>[\d.]+) m\.<br>"
    r"Estimated speed of (?P<speed>[\d.]+)<br>"
    r"Zone (?P<zone>\d+)<br>",
    re.ASCII,
)

DEFAULT_NBN_TABLE = "#nbnenabled > #sample"
DEFAULT_PROVIDERS_TABLE = "#eproviders > #sample"

NBN_AVAILABLE_TEXT = "YES"
PROVIDER_AVAILABLE_TEXT = "Yes"

# 1-based column positions within a provider row
PROVIDER_COLUMNS = [
    (2, "name"),
    (3, "status"),
    (4, "estimate"),
    (5, "availability"),
]


def extract_named_fields(pattern: Pattern, text: str) -> Optional[Dict[str, str]]:
    """Return a mapping of group name to captured text, or None if nothing matches."""
    match = pattern.search(text)
    if match is None:
        return None
    return match.groupdict()


def _body_rows(soup: BeautifulSoup, table_selector: str) -> List[Tag]:
    rows: List[Tag] = []
    for table in soup.select(table_selector):
        rows.extend(table.select(":scope > tbody > tr, :scope > tr"))
    return rows


class BS4PageParser(IPageParser):
    """
    Extraction order matches the page: summary fields first, then the NBN
    table, then the provider table. The first failure aborts the parse.
    """

    def __init__(
        self,
        nbn_table_selector: str = DEFAULT_NBN_TABLE,
        providers_table_selector: str = DEFAULT_PROVIDERS_TABLE,
        pattern: Pattern = PRIMARY_FIELDS_PATTERN,
    ):
        self.nbn_table_selector = nbn_table_selector
        self.providers_table_selector = providers_table_selector
        self.pattern = pattern

    def parse(self, html: str) -> ExchangeInfo:
        primary = self.extract_primary_fields(html)

        soup = BeautifulSoup(html, "html.parser")
        nbn_available = self.extract_nbn_available(soup)
        providers = self.extract_providers(soup)

        logger.debug(
            f"[Parser] exchange={primary['exchange']!r} | zone={primary['zone']} | "
            f"nbn={nbn_available} | providers={len(providers)}"
        )
        return ExchangeInfo(
            **primary,
            nbn_available=nbn_available,
            providers=providers,
        )

    def extract_primary_fields(self, html: str) -> Dict[str, Any]:
        captures = extract_named_fields(self.pattern, html)
        if captures is None:
            raise ExtractionError("primary fields")
        return convert_primary_fields(captures)

    def extract_nbn_available(self, soup: BeautifulSoup) -> bool:
        cells = [
            cell
            for row in _body_rows(soup, self.nbn_table_selector)
            for cell in row.select(":scope > td")
        ]
        if len(cells) != 1:
            raise ExtractionError("nbn availability")
        return cells[0].get_text() == NBN_AVAILABLE_TEXT

    def extract_providers(self, soup: BeautifulSoup) -> List[EquipmentProvider]:
        rows = _body_rows(soup, self.providers_table_selector)
        if len(rows) < 2:
            raise ExtractionError("equipment providers")

        providers = []
        # Even rows are spacers between provider rows
        for row in rows[1::2]:
            providers.append(self._parse_provider_row(row))
        return providers

    def _parse_provider_row(self, row: Tag) -> EquipmentProvider:
        values = {}
        for position, column in PROVIDER_COLUMNS:
            cells = row.select(f":scope > td:nth-child({position})")
            if len(cells) != 1:
                raise ExtractionError(f"equipment provider {column}")
            values[column] = cells[0].get_text()

        return EquipmentProvider(
            name=values["name"],
            status=values["status"],
            estimate=values["estimate"],
            available=values["availability"] == PROVIDER_AVAILABLE_TEXT,
        )
