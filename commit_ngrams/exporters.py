import json
from pathlib import Path
from typing import Callable, TypeAlias

from commit_ngrams.data import NGram, OutputLine, OutputLines

ENCODING = "utf-8"

HEADER = [
    "author",
    "first 3-gram",
    "second 3-gram",
    "third 3-gram",
    "fourth 3-gram",
    "fifth 3-gram",
]


def quoted(value: str) -> str:
    # embedded quotes are kept as is, consumers read this exact format
    return f"'{value}'"


def ngram_text(ngram: NGram) -> str:
    return " ".join(ngram.words)


FILE_HEADING = ",".join(quoted(column) for column in HEADER)


def render_line(line: OutputLine) -> str:
    columns = [quoted(line.author)]
    columns.extend(quoted(ngram_text(ngram)) for ngram in line.ngrams)
    return ",".join(columns)


def render_csv(lines: OutputLines) -> str:
    rows = [FILE_HEADING]
    rows.extend(render_line(line) for line in lines)
    return "\n".join(rows) + "\n"


def export_csv(lines: OutputLines, out: Path) -> None:
    Path(out).write_bytes(render_csv(lines).encode(ENCODING))


def export_json(lines: OutputLines, out: Path) -> None:
    report = [
        {"author": line.author, "ngrams": [ngram_text(n) for n in line.ngrams]}
        for line in lines
    ]
    with open(out, "w", encoding=ENCODING) as f:
        json.dump(report, f, ensure_ascii=False, indent=2)


ExportFn: TypeAlias = Callable[[OutputLines, Path], None]
exporters: dict[str, ExportFn] = {"csv": export_csv, "json": export_json}
