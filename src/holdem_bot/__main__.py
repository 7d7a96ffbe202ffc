#!/usr/bin/env python3
"""
Command-line demo for the decision engine.

Builds a table around one bot seat and prints the chosen action with its
diagnostics.

Usage:
    python -m holdem_bot --hole AC AD
    python -m holdem_bot --hole AH KH --board 2H 7H 9D --pot 300 --to-call 100
"""

import argparse
import logging
import random
import sys
from typing import List, Optional
from pydantic import ValidationError
from holdem_bot.models.player import Player
from holdem_bot.models.decision_context import DecisionContext
from holdem_bot.models.decision import DecisionDiagnostics
from holdem_bot.advisor.decision_engine import DecisionEngine


def build_context(args: argparse.Namespace) -> DecisionContext:
    """Table with the bot last to act and `opponents` other seats."""
    big_blind = args.big_blind
    current_bet = args.to_call
    players = []
    for seat in range(args.opponents):
        players.append(Player(
            name=f"Opponent {seat + 1}",
            seat=seat,
            chips=args.chips,
            round_bet=current_bet,
            dealer=seat == 0,
            big_blind=seat == min(1, args.opponents - 1)
        ))
    players.append(Player(name="Bot", seat=args.opponents, chips=args.chips, cards=args.hole))

    return DecisionContext(
        current_bet=current_bet,
        pot=args.pot,
        small_blind=max(1, big_blind // 2),
        big_blind=big_blind,
        raises_this_round=args.raises,
        current_phase_index={0: 0, 3: 1, 4: 2, 5: 3}[len(args.board)],
        players=players,
        last_raise=max(big_blind, current_bet),
        community_cards=args.board
    )


def print_diagnostics(diagnostics: DecisionDiagnostics) -> None:
    for key, value in diagnostics.model_dump().items():
        if isinstance(value, float):
            value = f"{value:.2f}"
        print(f"  {key:<17} {value}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Ask the hold'em bot for one decision")
    parser.add_argument("--hole", nargs=2, required=True, metavar="CARD", help="Hole cards, e.g. AC AD")
    parser.add_argument("--board", nargs="*", default=[], metavar="CARD", help="0, 3, 4 or 5 community cards")
    parser.add_argument("--pot", type=int, default=30, help="Chips in the pot")
    parser.add_argument("--to-call", type=int, default=0, help="Current bet to match")
    parser.add_argument("--chips", type=int, default=1000, help="Stack of every seat")
    parser.add_argument("--big-blind", type=int, default=20, help="Big blind")
    parser.add_argument("--raises", type=int, default=0, help="Raises already made this round")
    parser.add_argument("--opponents", type=int, default=2, help="Number of opponents")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible decisions")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if len(args.board) not in (0, 3, 4, 5):
        parser.error("--board takes 0, 3, 4 or 5 cards")
    if args.opponents < 1:
        parser.error("--opponents must be at least 1")

    try:
        context = build_context(args)
    except (ValidationError, ValueError) as e:
        print(f"Invalid table: {e}", file=sys.stderr)
        return 2

    source = random.Random(args.seed)
    engine = DecisionEngine(rng=source.random, observer=print_diagnostics)
    bot = context.players[-1]

    print(f"Decision for {bot.name}:")
    decision = engine.choose_bot_action(bot, context)
    print(f"\n=> {decision}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
