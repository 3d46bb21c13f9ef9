"""
Exception hierarchy for ADSL exchange lookups.
Every error is terminal for the lookup that raised it — nothing is retried.
"""

from typing import Optional


class ADSLLookupError(Exception):
    """Base exception for all lookup failures."""


class NetworkError(ADSLLookupError):
    """The request could not be built or the transport failed."""

    def __init__(self, url: str, detail: Optional[str] = None):
        self.url = url
        self.detail = detail
        message = f"Request to {url} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AddressNotFoundError(ADSLLookupError):
    """The lookup site redirected to its error page."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"could not locate address: '{address}'")


class ExtractionError(ADSLLookupError):
    """A field could not be pulled out of the result page."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"could not parse {field}")
