from .i_exchange_gateway import ExchangePage, IExchangeGateway
from .i_page_parser import IPageParser

__all__ = [
    "ExchangePage",
    "IExchangeGateway",
    "IPageParser",
]
