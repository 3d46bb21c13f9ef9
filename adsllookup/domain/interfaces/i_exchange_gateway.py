"""
IExchangeGateway - Port: fetches the lookup site's answer for an address.
Implementations POST the address and follow redirects to the final page.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ExchangePage:
    path: str  # Final request path after redirects, e.g. "/error.php"
    html: str
    url: str = ""
    status_code: int = 200


class IExchangeGateway(ABC):
    """Port for querying the ADSL exchange lookup site."""

    @abstractmethod
    def fetch_page(self, address: str) -> ExchangePage:
        """
        Submits the address to the lookup site and returns the resolved page.
        Raises NetworkError if the request cannot be completed.
        """
        pass
