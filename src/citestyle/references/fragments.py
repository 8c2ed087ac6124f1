"""Ordered fragment assembly for bibliography entries.

An entry is a sequence of optional fragments, each declaring the
separator that follows it. Empty fragments are dropped before joining,
and the separator of the last fragment that survives becomes a terminal
period (unless the fragment is a link or identifier that must end bare),
so no cleanup of the joined text is ever needed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from citestyle.references.markup import Markup

TERMINAL_PUNCTUATION = ".?!"
SOFT_SEPARATORS = ("", ",", ";", ":")


@dataclass(frozen=True)
class Fragment:
    """One piece of an entry.

    Attributes:
        text: Rendered text (may already contain markup)
        sep: Punctuation that follows the fragment
        quote: Quote mark wrapping the text; the separator goes inside it
        final_period: Close the entry with a period when this fragment is last
    """

    text: str
    sep: str = "."
    quote: str = ""
    final_period: bool = True


def join_parts(parts: Iterable[str | None], sep: str = ", ") -> str:
    """Join the non-empty parts with a separator."""
    return sep.join(p.strip() for p in parts if p and p.strip())


def _close(fragment: Fragment, sep: str, markup: Markup) -> str:
    text = fragment.text.strip()
    bare = markup.strip(text)

    if bare.endswith(sep):
        sep = ""
    elif sep == "." and bare[-1:] in TERMINAL_PUNCTUATION:
        sep = ""
    elif sep == "," and bare[-1:] in "?!":
        sep = ""

    if fragment.quote:
        return f"{fragment.quote}{text}{sep}{fragment.quote}"
    return f"{text}{sep}"


class EntryBuilder:
    """Collects fragments for one bibliography entry.

    Example:
        entry = EntryBuilder()
        entry.add("Smith, John")
        entry.add("(2023)")
        entry.add("A Study")
        entry.render()  # "Smith, John. (2023). A Study."
    """

    def __init__(self, markup: Markup = Markup.PLAIN):
        self.markup = markup
        self._fragments: list[Fragment] = []

    def add(
        self, text: str | None, sep: str = ".", quote: str = "", final_period: bool = True
    ) -> EntryBuilder:
        """Append a fragment; empty text is skipped."""
        if text and text.strip():
            self._fragments.append(
                Fragment(text=text, sep=sep, quote=quote, final_period=final_period)
            )
        return self

    def __len__(self) -> int:
        return len(self._fragments)

    def render(self) -> str:
        """Join the collected fragments into the final entry text."""
        pieces = []
        last = len(self._fragments) - 1
        for i, fragment in enumerate(self._fragments):
            sep = fragment.sep
            if i == last and fragment.final_period and sep in SOFT_SEPARATORS:
                sep = "."
            pieces.append(_close(fragment, sep, self.markup))
        return " ".join(pieces)
