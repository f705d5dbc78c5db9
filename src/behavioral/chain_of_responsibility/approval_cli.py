"""Command-line driver: run purchase amounts through an approval chain."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from behavioral.chain_of_responsibility.approval_sequence import ApprovalChain
from behavioral.chain_of_responsibility.purchase_approval_chain import build_default_chain

DEFAULT_AMOUNTS = (800, 4500, 12000)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run purchase requests through the approval chain.")
    parser.add_argument("amounts", nargs="*", type=int, default=list(DEFAULT_AMOUNTS),
                        help="purchase amounts to process (default: %(default)s)")
    parser.add_argument("--sequence", action="store_true",
                        help="dispatch through the immutable ApprovalChain instead of linked approvers")
    parser.add_argument("-v", "--verbose", action="store_true", help="log chain traversal to stderr")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.verbose:
        logging.getLogger("behavioral.chain_of_responsibility").setLevel(logging.DEBUG)

    chain = ApprovalChain.default() if args.sequence else build_default_chain()

    amounts: List[int] = args.amounts
    for amount in amounts:
        chain.process(amount)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
