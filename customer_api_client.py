"""Customer API client.

This module defines a small client wrapper around the Customer API
using the ``requests`` library.  It exposes one method per route:

* :meth:`CustomerAPIClient.list_customers` – return every customer.
* :meth:`CustomerAPIClient.get_customer` – fetch a single customer by id.
* :meth:`CustomerAPIClient.create_customer` – create a customer.
* :meth:`CustomerAPIClient.update_customer` – replace a customer.
* :meth:`CustomerAPIClient.delete_customer` – delete a customer.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with ``status_code`` and ``message``.

The module can also be used from the command line::

    python customer_api_client.py --base-url http://localhost:8080 list
    python customer_api_client.py create c1 Ada 555
    python customer_api_client.py get c1
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class CustomerAPIClient:
    """Client for interacting with the Customer API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/customers``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _customer_path(customer_id: str) -> str:
        return f"/customer/{quote(customer_id, safe='')}"

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all customers.

        Returns:
            A tuple ``(customers, error)``.  ``customers`` is an empty
            list when the request fails.
        """
        data, error = self._request("GET", "/customers")
        if error:
            return [], error
        return data or [], None

    def get_customer(self, customer_id: str) -> Result:
        """Fetch a single customer by id."""
        return self._request("GET", self._customer_path(customer_id))

    def create_customer(self, customer: Dict[str, Any]) -> Result:
        """Create a customer from a mapping with ``id``, ``name`` and ``number``."""
        return self._request("POST", "/customer", json_body=customer)

    def update_customer(self, customer_id: str, customer: Dict[str, Any]) -> Result:
        """Replace the customer stored under ``customer_id``."""
        return self._request("PUT", self._customer_path(customer_id), json_body=customer)

    def delete_customer(self, customer_id: str) -> Result:
        """Delete a customer by id."""
        return self._request("DELETE", self._customer_path(customer_id))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Customer API command line client.")
    parser.add_argument(
        "--base-url",
        default=os.getenv("CUSTOMER_API_URL", "http://localhost:8080"),
        help="Base URL of the API (default: $CUSTOMER_API_URL or http://localhost:8080)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List all customers")
    get_p = sub.add_parser("get", help="Show one customer")
    get_p.add_argument("id")
    for name in ("create", "update"):
        p = sub.add_parser(name, help=f"{name.capitalize()} a customer")
        p.add_argument("id")
        p.add_argument("name")
        p.add_argument("number")
    del_p = sub.add_parser("delete", help="Delete a customer")
    del_p.add_argument("id")
    return parser


def main(argv: Optional[Sequence[str]] = None, client: Optional[CustomerAPIClient] = None) -> int:
    """Run one command and print the JSON result.  Returns the exit code."""
    args = build_parser().parse_args(argv)
    client = client or CustomerAPIClient(base_url=args.base_url)

    if args.command == "list":
        data, error = client.list_customers()
    elif args.command == "get":
        data, error = client.get_customer(args.id)
    elif args.command == "create":
        data, error = client.create_customer({"id": args.id, "name": args.name, "number": args.number})
    elif args.command == "update":
        data, error = client.update_customer(args.id, {"id": args.id, "name": args.name, "number": args.number})
    else:
        data, error = client.delete_customer(args.id)

    if error:
        print(f"[!] {error['status_code']}: {error['message']}", file=sys.stderr)
        return 1
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
