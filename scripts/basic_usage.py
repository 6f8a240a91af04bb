#!/usr/bin/env python3
"""
Walk through the common SDK calls against the eTIMS sandbox.

Authenticates, initializes a device, pulls the code list and sends one sales
invoice, printing each response. Credentials default to the
``ETIMS_API_USERNAME`` / ``ETIMS_API_PASSWORD`` settings.
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, Optional

from service_etims.app.sdk import EtimsSDK
from shared.config import get_settings
from shared.errors import EtimsError, format_error


async def run_examples(
    sdk: EtimsSDK,
    *,
    username: str,
    password: str,
    tin: str = "P000000045R",
    bhf_id: str = "00",
    device_serial: str = "MOVA22",
) -> Dict[str, Any]:
    """Run each example call in order and return the responses by step."""
    results: Dict[str, Any] = {}

    results["auth"] = await sdk.auth.get_token({"username": username, "password": password})

    results["initialization"] = await sdk.initialization.select_init_osdc_info(
        {"tin": tin, "bhfId": bhf_id, "dvcSrlNo": device_serial}
    )

    results["code_list"] = await sdk.basic_data.select_code_list(
        {"tin": tin, "bhfId": bhf_id, "lastReqDt": "20220101010101"}
    )

    results["sales"] = await sdk.sales.send_sales_trns({
        "tin": tin,
        "bhfId": bhf_id,
        "invcNo": "INV001",
        "salesTrnsItems": [
            {
                "itemCd": "ITEM001",
                "itemNm": "Test Item",
                "qty": 1,
                "prc": 100,
                "splyAmt": 100,
                "taxTyCd": "V",
                "taxAmt": 16,
            }
        ],
    })

    return results


def _parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the basic eTIMS SDK examples.")
    parser.add_argument("--username", default=settings.api_username, help="API username")
    parser.add_argument("--password", default=settings.api_password, help="API password")
    parser.add_argument("--tin", default="P000000045R", help="Taxpayer identification number")
    parser.add_argument("--bhf-id", default="00", help="Branch id")
    parser.add_argument("--device-serial", default="MOVA22", help="Device serial number")
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
    args = _parse_args(argv)
    if not args.username or not args.password:
        print("[etims-examples] --username/--password or ETIMS_API_USERNAME/ETIMS_API_PASSWORD required",
              file=sys.stderr)
        return 2

    try:
        results = asyncio.run(
            run_examples(
                EtimsSDK(),
                username=args.username,
                password=args.password,
                tin=args.tin,
                bhf_id=args.bhf_id,
                device_serial=args.device_serial,
            )
        )
    except KeyboardInterrupt:
        return 130
    except EtimsError as exc:
        print(json.dumps(format_error(exc), indent=2), file=sys.stderr)
        return 1

    print(json.dumps(results, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
