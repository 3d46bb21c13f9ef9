"""
Dependency Injection Container.
Wires the adapters to their interfaces and composes the lookup use case.
This is the ONLY place that knows about concrete implementations.
"""

from .config import Config
from ..adapters.adsl2exchanges_adapter import ADSL2ExchangesAdapter
from ..adapters.bs4_page_parser import BS4PageParser
from ..domain.entities.exchange_info import ExchangeInfo
from ..use_cases.lookup_exchange import LookupExchangeRequest, LookupExchangeUseCase


class Container:
    """
    Composes the full application object graph.
    Swap any adapter by changing a single line here.
    """

    def __init__(self, config: Config):
        self.config = config

        # ── Adapters (Ports & Adapters layer) ─────────────────────────────
        self.gateway = ADSL2ExchangesAdapter(
            lookup_url=config.lookup_url,
            timeout=config.request_timeout,
            user_agent=config.user_agent,
        )
        self.parser = BS4PageParser(
            nbn_table_selector=config.nbn_table_selector,
            providers_table_selector=config.providers_table_selector,
        )

        # ── Use Cases (Application layer) ──────────────────────────────────
        self.lookup_use_case = LookupExchangeUseCase(
            gateway=self.gateway,
            parser=self.parser,
            error_path=config.error_path,
        )

    def lookup(self, address: str) -> ExchangeInfo:
        """Shortcut for callers that only have an address string."""
        return self.lookup_use_case.execute(LookupExchangeRequest(address=address))
