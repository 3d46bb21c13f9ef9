"""
Configuration — reads all settings from environment variables.
Every setting has a working default; the site's URL, error path and table
selectors live here rather than as globals in the adapters.
Uses python-dotenv for local dev.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..adapters.adsl2exchanges_adapter import (
    DEFAULT_LOOKUP_URL,
    DEFAULT_TIMEOUT_SECONDS,
    USER_AGENT,
)
from ..adapters.bs4_page_parser import DEFAULT_NBN_TABLE, DEFAULT_PROVIDERS_TABLE
from ..use_cases.lookup_exchange import DEFAULT_ERROR_PATH

load_dotenv()


@dataclass(frozen=True)
class Config:
    # Lookup site
    lookup_url: str = DEFAULT_LOOKUP_URL
    error_path: str = DEFAULT_ERROR_PATH

    # Page layout
    nbn_table_selector: str = DEFAULT_NBN_TABLE
    providers_table_selector: str = DEFAULT_PROVIDERS_TABLE

    # Transport
    request_timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls) -> "Config":
        invalid = []
        text_settings = {
            "ADSL_LOOKUP_URL": DEFAULT_LOOKUP_URL,
            "ADSL_ERROR_PATH": DEFAULT_ERROR_PATH,
            "ADSL_NBN_TABLE": DEFAULT_NBN_TABLE,
            "ADSL_PROVIDERS_TABLE": DEFAULT_PROVIDERS_TABLE,
            "ADSL_USER_AGENT": USER_AGENT,
        }
        values = {}
        for key, default in text_settings.items():
            value = os.getenv(key, default).strip()
            if not value:
                invalid.append(key)
            values[key] = value

        timeout = None
        raw_timeout = os.getenv("ADSL_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
        try:
            timeout = float(raw_timeout)
            if timeout <= 0:
                invalid.append("ADSL_REQUEST_TIMEOUT")
        except ValueError:
            invalid.append("ADSL_REQUEST_TIMEOUT")

        if invalid:
            raise EnvironmentError(
                f"Invalid environment variables: {', '.join(invalid)}\n"
                f"Unset them to use the defaults, or see .env.example."
            )

        return cls(
            lookup_url=values["ADSL_LOOKUP_URL"],
            error_path=values["ADSL_ERROR_PATH"],
            nbn_table_selector=values["ADSL_NBN_TABLE"],
            providers_table_selector=values["ADSL_PROVIDERS_TABLE"],
            request_timeout=timeout,
            user_agent=values["ADSL_USER_AGENT"],
        )
