"""Turn-based fight against a healing boss: can it be beaten, and in how many turns."""

import argparse
import sys

LOSE = "NO"
WIN = "OK"


def battle(h: int, a: int, b: int) -> tuple[str, int]:
    """Fight a boss with ``h`` HP, dealing ``a`` damage a turn while it heals ``b``.

    Returns ``("OK", turns)`` when the boss falls, otherwise ``("NO", 0)``.
    Raises ValueError for a negative argument.
    """
    if min(h, a, b) < 0:
        raise ValueError("hit points, damage and healing must not be negative")
    if a >= h:
        return WIN, 1
    if a <= b:
        return LOSE, 0
    turn_damage = a - b
    last_damage = h % turn_damage or turn_damage
    return WIN, (h - last_damage) // turn_damage + 1


def main(argv=None) -> int:
    """Read ``h a b`` from one line of standard input and print the outcome."""
    parser = argparse.ArgumentParser(
        prog="boss-battle",
        description="Read 'HP DAMAGE HEAL' from standard input and report the fight.",
    )
    parser.parse_args(argv)

    fields = sys.stdin.readline().split()
    if len(fields) < 3:
        parser.error("expected three numbers on one line: HP DAMAGE HEAL")
    try:
        h, a, b = (int(field) for field in fields[:3])
        result, turns = battle(h, a, b)
    except ValueError as exc:
        parser.error(str(exc))

    print(result)
    if result == WIN:
        print(turns)
    return 0


if __name__ == "__main__":
    sys.exit(main())