"""CLI tool for calculating trades and managing the trade history.

Usage:
    python -m riskcalc.cli calculate
    python -m riskcalc.cli history
    python -m riskcalc.cli delete <trade_id>
    python -m riskcalc.cli clear
"""

import sys

from pydantic import ValidationError

from riskcalc.config import settings
from riskcalc.database import engine, create_db_and_tables
from riskcalc.schemas.trade import TradeProposal
from riskcalc.services import trade_desk
from riskcalc.services.history import SqlHistoryStore
from riskcalc.services.risk import risk_label
from riskcalc.utils.constants import LEVERAGE_OPTIONS
from riskcalc.utils.logging import setup_logging


def _store() -> SqlHistoryStore:
    create_db_and_tables()
    return SqlHistoryStore(engine)


def _prompt(label: str, default: str = "") -> str:
    suffix = f" [{default}]" if default else ""
    value = input(f"{label}{suffix}: ").strip()
    return value or default


def calculate():
    """Prompt for a trade, print its calculation and record it."""
    raw = {
        "type": _prompt("Direction (long/short)", "long").lower(),
        "asset": _prompt("Asset", "BTC/EUR"),
        "amount": _prompt("Amount"),
        "entry_price": _prompt("Entry price"),
        "take_profit": _prompt("Take profit"),
        "stop_loss": _prompt("Stop loss"),
        "leverage": _prompt(f"Leverage {LEVERAGE_OPTIONS}", "1"),
    }
    try:
        proposal = TradeProposal.model_validate(raw)
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"{field}: {err['msg']}")
        sys.exit(1)

    result = trade_desk.submit_trade(proposal, _store(), settings.history_key)
    if not result.accepted:
        for slot, message in result.errors.items():
            print(f"{slot}: {message}")
        sys.exit(1)

    calc = result.calculation
    print(f"\nTrade {result.trade.id} recorded.")
    print(f"Potential profit: {calc.potential_profit:.2f} (+{calc.profit_percentage:.2f}%)")
    print(f"Potential loss:   {calc.potential_loss:.2f} ({calc.loss_percentage:.2f}%)")
    print(f"Risk/reward:      1:{calc.risk_reward_ratio:.2f}")
    print(f"Risk level:       {risk_label(calc.risk_level)}")


def history():
    """Print the trade history, newest first."""
    rows = trade_desk.history_rows(_store(), settings.history_key)
    if not rows:
        print("No trades recorded.")
        return
    for row in rows:
        t = row.trade
        ratio = f"1:{row.risk_reward_ratio}" if row.risk_reward_ratio is not None else "n/a"
        print(
            f"{t.timestamp:%d/%m/%Y %H:%M}  {t.id}  {t.asset:<8} {t.type.upper():<5} "
            f"{t.amount:g}  entry={t.entry_price:g} tp={t.take_profit:g} sl={t.stop_loss:g} "
            f"x{t.leverage:g}  {ratio} ({row.risk_band or '-'})"
        )


def delete(trade_id: str):
    if trade_desk.delete_trade(_store(), settings.history_key, trade_id):
        print(f"Deleted trade {trade_id}.")
    else:
        print(f"No trade with id {trade_id}.")


def clear():
    confirm = input("Delete all recorded trades? [y/N]: ").strip().lower()
    if confirm != "y":
        print("Aborted.")
        return
    count = trade_desk.clear_history(_store(), settings.history_key)
    print(f"Removed {count} trades.")


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m riskcalc.cli <command>")
        print("Commands: calculate, history, delete <trade_id>, clear")
        sys.exit(1)

    setup_logging()
    command = sys.argv[1]
    if command == "calculate":
        calculate()
    elif command == "history":
        history()
    elif command == "delete" and len(sys.argv) == 3:
        delete(sys.argv[2])
    elif command == "clear":
        clear()
    else:
        print(f"Unknown command: {' '.join(sys.argv[1:])}")
        sys.exit(1)


if __name__ == "__main__":
    main()
