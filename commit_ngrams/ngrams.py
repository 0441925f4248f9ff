import re
from collections import Counter, defaultdict
from typing import Iterable

from nltk import ngrams

from commit_ngrams.data import Author, MessagesByAuthor, NGram, OutputLine, Payloads

NGRAM_LENGTH = 3
TOP_NGRAMS = 5
STRIPPED_CHARS = ",.!?"

# ascii whitespace only, U+2003 and friends stay inside words
_whitespace = re.compile(r"[ \t\n\x0b\f\r]+")
_strip_table = str.maketrans("", "", STRIPPED_CHARS)


def group_by_author(payloads: Payloads) -> MessagesByAuthor:
    """
    Collect commit messages per author, keeping commit order and duplicates

    Callers must not rely on the order of authors in the result
    """
    grouped: MessagesByAuthor = defaultdict(list)
    for payload in payloads:
        for commit in payload.commits:
            grouped[commit.author].append(commit.message)
    return dict(grouped)


def tokenize(message: str) -> list[str]:
    words = (
        word.translate(_strip_table) for word in _whitespace.split(message.lower())
    )
    return [word for word in words if word.strip()]


def make_ngrams(words: list[str], length: int = NGRAM_LENGTH) -> list[NGram]:
    return [NGram(gram) for gram in ngrams(words, length)]


def top_ngrams(
    messages: Iterable[str], limit: int = TOP_NGRAMS, length: int = NGRAM_LENGTH
) -> list[NGram]:
    """
    Most frequent n-grams across messages, windows never cross messages

    Distinct n-grams are ordered by their words, then stable sorted by count
    ascending and reversed, so equal counts come out in reverse word order.
    """
    counts = Counter(
        ngram
        for message in messages
        for ngram in make_ngrams(tokenize(message), length)
    )
    ranked = sorted(sorted(counts.items()), key=lambda item: item[1])
    ranked.reverse()
    return [ngram for ngram, _ in ranked[:limit]]


def convert(author: Author, messages: list[str]) -> OutputLine:
    return OutputLine(author=author.name, ngrams=tuple(top_ngrams(messages)))
