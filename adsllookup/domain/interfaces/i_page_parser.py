"""
IPageParser - Port: turns a lookup result page into an ExchangeInfo.
"""

from abc import ABC, abstractmethod

from ..entities.exchange_info import ExchangeInfo


class IPageParser(ABC):
    """Port for extracting exchange details from the result page HTML."""

    @abstractmethod
    def parse(self, html: str) -> ExchangeInfo:
        """
        Extracts every field from the page or raises ExtractionError
        for the first one that cannot be read.
        """
        pass
