"""
Command line front end.

    pyocra generate OCRA-1:HOTP-SHA1-6:QN08 --key 3132...3930 --challenge 00000000
    echo 00000000 | pyocra generate OCRA-1:HOTP-SHA1-6:QN08 --key 3132...3930
    pyocra verify OCRA-1:HOTP-SHA1-6:QN08 237653 --key 3132...3930 --challenge 00000000
    pyocra challenge OCRA-1:HOTP-SHA1-6:QN08
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from . import random_challenge
from .errors import OCRAError
from .ocra import OCRA

log = logging.getLogger(__name__)


def _generate_kwargs(ocra: OCRA, args) -> dict:
    challenge = args.challenge
    if challenge is None:
        challenge = sys.stdin.readline().strip()

    timestamp = args.timestamp
    if args.now:
        timestamp = ocra.timecode(time.time())

    return dict(
        challenge=challenge,
        counter=args.counter,
        password=args.password,
        session_info=args.session_info,
        timestamp=timestamp,
    )


def cmd_generate(args) -> int:
    ocra = OCRA(args.suite)
    print(ocra.generate(args.key, **_generate_kwargs(ocra, args)))
    return 0


def cmd_verify(args) -> int:
    ocra = OCRA(args.suite)
    ok = ocra.verify(args.response, args.key, **_generate_kwargs(ocra, args))
    print("valid" if ok else "invalid")
    return 0 if ok else 1


def cmd_challenge(args) -> int:
    print(random_challenge(args.suite))
    return 0


def _add_input_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--key", required=True, help="Shared secret as hex")
    p.add_argument("--challenge", help="Challenge/question; read from stdin if omitted")
    p.add_argument("--counter", type=int, help="Counter value (suites with C)")
    p.add_argument("--password", help="Password/PIN (suites with PSHAx)")
    p.add_argument("--session-info", help="Session information as hex (suites with Snnn)")
    ts = p.add_mutually_exclusive_group()
    ts.add_argument("--timestamp", type=int, help="Timestamp in time steps (suites with TG)")
    ts.add_argument("--now", action="store_true", help="Use the current time as timestamp")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pyocra", description="OCRA (RFC 6287) challenge-response calculator")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # generate
    pg = sub.add_parser("generate", help="Compute the response to a challenge")
    pg.add_argument("suite", help="OCRASuite, e.g. OCRA-1:HOTP-SHA1-6:QN08")
    _add_input_arguments(pg)
    pg.set_defaults(func=cmd_generate)

    # verify
    pv = sub.add_parser("verify", help="Check a response to a challenge")
    pv.add_argument("suite", help="OCRASuite, e.g. OCRA-1:HOTP-SHA1-6:QN08")
    pv.add_argument("response", help="Response to verify")
    _add_input_arguments(pv)
    pv.set_defaults(func=cmd_verify)

    # challenge
    pc = sub.add_parser("challenge", help="Print a random challenge for a suite")
    pc.add_argument("suite", help="OCRASuite, e.g. OCRA-1:HOTP-SHA1-6:QN08")
    pc.set_defaults(func=cmd_challenge)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except OCRAError as e:
        log.debug("%s failed", args.cmd, exc_info=True)
        print("error: {}".format(e), file=sys.stderr)
        return 1
    except ValueError as e:
        # timecode() on a suite without a usable time step
        print("error: {}".format(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
