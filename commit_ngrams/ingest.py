import logging
from pathlib import Path
from typing import Iterable

from commit_ngrams.data import Payloads, PushEvent
from commit_ngrams.events import decode_event

ENCODING = "utf-8"

logger = logging.getLogger("commit_ngrams.ingest")


def parse_payloads(lines: Iterable[str]) -> Payloads:
    """
    Decode event lines and keep push payloads in input order

    Blank lines are skipped, the first malformed line aborts with
    MalformedEventError
    """
    payloads: Payloads = []
    other = 0
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        event = decode_event(line, line_number)
        if isinstance(event, PushEvent):
            payloads.append(event.payload)
        else:
            other += 1

    logger.debug(f"Kept {len(payloads)} push events, skipped {other} other events")
    return payloads


def read_payloads(path: Path) -> Payloads:
    # lines end at "\n" only, a lone "\r" is whitespace inside a record
    with open(path, encoding=ENCODING, newline="") as f:
        return parse_payloads(f.read().split("\n"))
