#!/usr/bin/env python3
"""Smoke check for a running lexiform API.

Run the server first:
  lexiform-api

Then run this check:
  python scripts/check_api.py
"""

import json
import sys

import httpx

BASE_URL = "http://localhost:8000"


def check_endpoint(name: str, method: str, path: str, data: dict | None = None) -> bool:
    """Call an API endpoint and print the result."""
    print(f"\n{'='*60}")
    print(f"CHECK: {name}")
    print(f"{'='*60}")

    url = f"{BASE_URL}{path}"
    print(f"{method} {path}")
    if data:
        print(f"Request: {json.dumps(data)}")

    try:
        with httpx.Client(timeout=30) as client:
            if method == "GET":
                response = client.get(url)
            else:
                response = client.post(url, json=data)
    except httpx.ConnectError:
        print("Could not connect to server. Is it running?")
        return False

    print(f"\nStatus: {response.status_code}")
    print(f"Response:\n{json.dumps(response.json(), indent=2)}")
    return response.status_code == 200


def main() -> int:
    print("="*60)
    print("LEXIFORM API SMOKE CHECK")
    print("="*60)

    if not check_endpoint("Health Check", "GET", "/"):
        print("\nServer not running. Start with: lexiform-api")
        return 1

    checks = [
        ("Conjugate - Known Verb", "POST", "/conjugate", {"action": "publish"}),
        ("Conjugate - Derived Verb", "POST", "/conjugate", {"action": "approve"}),
        ("Verb Fields", "POST", "/verb_fields", {"action": "create"}),
        ("Derive - Doubling Verb", "POST", "/derive", {"verb": "submit"}),
        ("Pluralize - Irregular", "POST", "/pluralize", {"word": "Person"}),
        ("Singularize - Regular", "POST", "/singularize", {"word": "categories"}),
        ("Noun - Compound Type", "POST", "/noun", {"type_name": "BlogPost"}),
        ("Type Meta - Compound Type", "POST", "/type_meta", {"type_name": "BlogPost"}),
    ]
    failures = sum(not check_endpoint(*check) for check in checks)

    print("\n" + "="*60)
    print(f"SMOKE CHECK COMPLETE ({failures} failed)")
    print("="*60)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
