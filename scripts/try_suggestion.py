#!/usr/bin/env python3
"""
One-off script to request suggestions from a running server.
NOT part of the test suite (needs the app running with a real provider key).
Run from project root: python scripts/try_suggestion.py <context> [field=value ...]
Example: python scripts/try_suggestion.py skills_suggestion position="Backend Engineer" industry=Fintech
Set SUGGEST_BASE_URL to target a server other than http://localhost:8000.
"""
import os
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.services.errors import SuggestionError
from app.services.suggestion_client import DEFAULT_BASE_URL, SuggestionClient


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python scripts/try_suggestion.py <context> [field=value ...]")
        sys.exit(1)
    context = sys.argv[1]
    fields = {}
    for arg in sys.argv[2:]:
        key, sep, value = arg.partition("=")
        if not sep:
            print(f"Expected field=value, got: {arg}")
            sys.exit(1)
        fields[key] = value

    client = SuggestionClient(base_url=os.getenv("SUGGEST_BASE_URL", DEFAULT_BASE_URL))
    try:
        suggestions = client.suggest(context, **fields)
    except SuggestionError as e:
        print(f"  FAIL ({e.status_code}): {e.message}")
        if e.details:
            print(f"  Details: {e.details}")
        sys.exit(1)

    print(f"Suggestions for {context}:")
    for suggestion in suggestions:
        print("  -", suggestion)


if __name__ == "__main__":
    main()
