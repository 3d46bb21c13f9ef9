"""
ADSL Lookup — CLI Entry Point

Usage:
  # Look up the exchange serving an address
  python main.py lookup "59/47 Hampstead Road, Homebush West, NSW 2140"

  # Same, as JSON
  python main.py lookup --json "59/47 Hampstead Road, Homebush West, NSW 2140"

Exit codes: 0 success, 1 lookup failed, 2 address not found.
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv
load_dotenv()

from adsllookup.domain.entities.exchange_info import ExchangeInfo
from adsllookup.domain.errors import ADSLLookupError, AddressNotFoundError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("adsllookup")

EXIT_OK = 0
EXIT_LOOKUP_FAILED = 1
EXIT_NOT_FOUND = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="ADSL Lookup — ADSL/ADSL2+ exchange information by address"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup_parser = subparsers.add_parser(
        "lookup", help="Look up the exchange serving an address"
    )
    lookup_parser.add_argument("address", help="Free-form street address")
    lookup_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    return parser.parse_args(argv)


def format_report(info: ExchangeInfo) -> str:
    lines = [
        f"Exchange:        {info.exchange}",
        f"Zone:            {info.zone}",
        f"Distance:        {info.distance:g} m",
        f"Cable length:    {info.cable_length:g} m",
        f"Estimated speed: {info.estimated_speed}",
        f"NBN available:   {'yes' if info.nbn_available else 'no'}",
        "",
        f"Equipment providers ({len(info.providers)}):",
    ]
    for provider in info.providers:
        mark = "✓" if provider.available else "✗"
        lines.append(
            f"  {mark} {provider.name} | {provider.status} | {provider.estimate}"
        )
    return "\n".join(lines)


def run_lookup(address: str, as_json: bool = False) -> int:
    from adsllookup.infrastructure.config import Config
    from adsllookup.infrastructure.container import Container

    container = Container(Config.from_env())

    try:
        info = container.lookup(address)
    except AddressNotFoundError as e:
        logger.error(str(e))
        return EXIT_NOT_FOUND
    except ADSLLookupError as e:
        logger.error(f"Lookup failed: {e}")
        return EXIT_LOOKUP_FAILED

    if as_json:
        print(json.dumps(info.to_dict(), indent=2))
    else:
        print(format_report(info))
    return EXIT_OK


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.command == "lookup":
        return run_lookup(args.address, as_json=args.json)
    return EXIT_LOOKUP_FAILED


if __name__ == "__main__":
    sys.exit(main())
