from dataclasses import dataclass
from typing import TypeAlias

import pydantic


class Author(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    name: pydantic.StrictStr


class Commit(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    message: pydantic.StrictStr
    author: Author


class PushPayload(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    commits: list[Commit]


@dataclass(frozen=True)
class PushEvent:
    payload: PushPayload


@dataclass(frozen=True)
class OtherEvent:
    type_name: str


Event: TypeAlias = PushEvent | OtherEvent


@dataclass(frozen=True, order=True)
class NGram:
    words: tuple[str, ...]


@dataclass(frozen=True)
class OutputLine:
    author: str
    ngrams: tuple[NGram, ...]


Payloads: TypeAlias = list[PushPayload]
MessagesByAuthor: TypeAlias = dict[Author, list[str]]
OutputLines: TypeAlias = list[OutputLine]
