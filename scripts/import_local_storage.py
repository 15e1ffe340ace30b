#!/usr/bin/env python3
"""Import trades exported from the browser's localStorage into the history store.

Usage:
    python scripts/import_local_storage.py <export.json>

The export is the JSON value of the "trades" localStorage key: a list of
trades with camelCase fields and millisecond timestamps. Trades already in the
history (same id) are skipped.
"""

import json
import sys
from pathlib import Path

from pydantic import ValidationError


def import_file(path: str) -> int:
    from riskcalc.config import settings
    from riskcalc.database import engine, create_db_and_tables
    from riskcalc.services.history import SqlHistoryStore, merge_histories, trade_from_local_storage

    if not Path(path).exists():
        print(f"ERROR: export file not found: {path}")
        sys.exit(1)

    raw = json.loads(Path(path).read_text())
    if not isinstance(raw, list):
        print("ERROR: expected a JSON list of trades")
        sys.exit(1)

    incoming = []
    for i, item in enumerate(raw):
        try:
            incoming.append(trade_from_local_storage(item))
        except (KeyError, TypeError, ValidationError) as e:
            print(f"  SKIP entry {i}: {e}")

    create_db_and_tables()
    store = SqlHistoryStore(engine)
    history = store.load(settings.history_key)
    merged = merge_histories(history, incoming)
    store.save(settings.history_key, merged)

    added = len(merged) - len(history)
    print(f"Imported {added} of {len(raw)} trades ({len(merged)} in history)")
    return added


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    import_file(sys.argv[1])
