"""
LookupExchangeUseCase - resolves an address to its ADSL exchange details.

Strictly linear, fail fast:

  1. Fetch      — POST the address to the lookup site (NetworkError)
  2. Classify   — the site redirects unknown addresses to its error page
                  (AddressNotFoundError)
  3. Extract    — summary fields, NBN table, provider table (ExtractionError)

Either a fully populated ExchangeInfo is returned or exactly one error is
raised for the first failure. Nothing is retried and no partial result
escapes. The use case holds no per-lookup state, so one instance can serve
concurrent callers.
"""

import logging
from dataclasses import dataclass

from ..domain.entities.exchange_info import ExchangeInfo
from ..domain.errors import AddressNotFoundError, ExtractionError
from ..domain.interfaces.i_exchange_gateway import ExchangePage, IExchangeGateway
from ..domain.interfaces.i_page_parser import IPageParser

logger = logging.getLogger(__name__)

DEFAULT_ERROR_PATH = "/error.php"


@dataclass
class LookupExchangeRequest:
    address: str  # Sent verbatim; the lookup site is the only validator


class LookupExchangeUseCase:
    """
    Orchestrates fetch → classify → extract.
    Dependencies injected via constructor (Hexagonal Architecture).
    """

    def __init__(
        self,
        gateway: IExchangeGateway,
        parser: IPageParser,
        error_path: str = DEFAULT_ERROR_PATH,
    ):
        self.gateway = gateway
        self.parser = parser
        self.error_path = error_path

    def execute(self, request: LookupExchangeRequest) -> ExchangeInfo:
        address = request.address
        logger.info(f"[Lookup] ── START ── address={address!r}")

        page = self.gateway.fetch_page(address)
        self._classify(page, address)

        try:
            info = self.parser.parse(page.html)
        except ExtractionError as e:
            logger.warning(f"[Lookup] Extraction failed → {address!r} | field={e.field!r}")
            raise

        logger.info(
            f"[Lookup] ── DONE ── address={address!r} | exchange={info.exchange!r} | "
            f"zone={info.zone} | speed={info.estimated_speed} | "
            f"nbn={info.nbn_available} | providers={len(info.providers)}"
        )
        return info

    def _classify(self, page: ExchangePage, address: str) -> None:
        """The resolved path is the site's only success/failure signal."""
        if page.path == self.error_path:
            logger.warning(
                f"[Lookup] Address not found → {address!r} | path={page.path!r}"
            )
            raise AddressNotFoundError(address)
