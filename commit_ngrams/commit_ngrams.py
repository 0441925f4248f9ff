#!/usr/bin/env python3

import argparse
import logging
import sys
from pathlib import Path

from commit_ngrams.data import OutputLines, Payloads
from commit_ngrams.events import MalformedEventError
from commit_ngrams.exporters import exporters
from commit_ngrams.ingest import read_payloads
from commit_ngrams.ngrams import convert, group_by_author

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

DEFAULT_INPUT = "10K.github.jsonl"
DEFAULT_OUTPUT = "ngrams.csv"

logger = logging.getLogger("commit_ngrams")


def build_report(payloads: Payloads) -> OutputLines:
    """
    Top n-grams for every commit author found in push payloads

    :param payloads: push payloads in input order
    :return: one line per author, sorted by author name
    """
    grouped = group_by_author(payloads)
    commits = sum(len(messages) for messages in grouped.values())
    logger.info(f"Found {commits} commits by {len(grouped)} authors")
    authors = sorted(grouped.items(), key=lambda item: item[0].name)
    return [convert(author, messages) for author, messages in authors]


def run(input_file: Path, output_file: Path, fmt: str = "csv") -> OutputLines:
    """
    Read events, rank n-grams and write the report

    Nothing is written unless every input line was decoded

    :param input_file: JSON lines event log
    :param output_file: report destination, replaced if it exists
    :param fmt: one of exporters keys
    :return: written report lines
    """
    export = exporters.get(fmt)
    if export is None:
        raise ValueError(f"Unsupported export file format: {fmt}")

    logger.debug(f"Reading events from {input_file}")
    lines = build_report(read_payloads(input_file))
    export(lines, output_file)
    logger.info(f"Report for {len(lines)} authors written to {output_file}")
    return lines


def setup_logging(verbose: bool) -> None:
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.addHandler(ch)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Top 3-word sequences of commit messages per author "
        "from a GitHub events JSON lines file"
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--export", choices=sorted(exporters), default="csv")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        run(Path(args.input), Path(args.output), fmt=args.export)
    except MalformedEventError as e:
        logger.error(f"malformed event in {args.input}, {e}")
        return EXIT_FAILURE
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"io error: {e}")
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == "__main__":
    ret: int = main()
    sys.exit(ret)
