"""
ADSL2ExchangesAdapter - Implements IExchangeGateway.
Submits an address to adsl2exchanges.com.au using httpx and returns the
page the site finally lands on (the result page or its error page).
"""

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx

from ..domain.errors import NetworkError
from ..domain.interfaces.i_exchange_gateway import ExchangePage, IExchangeGateway

logger = logging.getLogger(__name__)

DEFAULT_LOOKUP_URL = "http://www.adsl2exchanges.com.au/addresslookupstart.php"
DEFAULT_TIMEOUT_SECONDS = 5.0
USER_AGENT = "Mozilla/5.0 (compatible; ADSLLookup/1.0)"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
ADDRESS_FIELD = "Address"


class ADSL2ExchangesAdapter(IExchangeGateway):
    """
    One form POST per lookup, redirects followed so the error sentinel
    page is visible to the caller. HTTP status codes are not inspected.
    """

    def __init__(
        self,
        lookup_url: str = DEFAULT_LOOKUP_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
    ):
        self.lookup_url = lookup_url
        self.timeout = timeout
        self.user_agent = user_agent

    def build_request(self, client: httpx.Client, address: str) -> httpx.Request:
        """
        The address is form-encoded verbatim; no validation happens here.
        Undecodable bytes smuggled in as surrogates are encoded back to the
        original bytes. Raises UnicodeEncodeError for any other lone surrogate.
        """
        body = urlencode(
            {ADDRESS_FIELD: address}, encoding="utf-8", errors="surrogateescape"
        )
        return client.build_request(
            "POST",
            self.lookup_url,
            content=body.encode("ascii"),
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    def fetch_page(self, address: str) -> ExchangePage:
        logger.info(f"[ADSL2Exchanges] POST {self.lookup_url} | address={address!r}")
        try:
            with httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
            ) as client:
                request = self.build_request(client, address)
                response = client.send(request)
                html = response.text
        except httpx.TimeoutException as e:
            logger.warning(f"[ADSL2Exchanges] Timeout requesting {self.lookup_url}")
            raise NetworkError(self.lookup_url, "Timeout") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"[ADSL2Exchanges] Error requesting {self.lookup_url}: {e}")
            raise NetworkError(self.lookup_url, str(e)) from e
        except UnicodeEncodeError as e:
            logger.warning(f"[ADSL2Exchanges] Could not encode address {address!r}: {e}")
            raise NetworkError(self.lookup_url, f"Could not encode address: {e}") from e

        page = ExchangePage(
            path=response.url.path,
            html=html,
            url=str(response.url),
            status_code=response.status_code,
        )
        logger.debug(
            f"[ADSL2Exchanges] Resolved → {page.url} | status={page.status_code} | "
            f"chars={len(page.html)}"
        )
        return page
