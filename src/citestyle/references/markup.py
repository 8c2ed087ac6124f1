"""Emphasis markup for rendered bibliography text."""

from enum import Enum


class Markup(str, Enum):
    """How italics and bold are marked in output text.

    PLAIN leaves emphasis to the presentation layer; MARKDOWN wraps it in
    asterisks.
    """

    PLAIN = "plain"
    MARKDOWN = "markdown"

    def italic(self, text: str) -> str:
        if not text or self == Markup.PLAIN:
            return text
        return f"*{text}*"

    def bold(self, text: str) -> str:
        if not text or self == Markup.PLAIN:
            return text
        return f"**{text}**"

    def strip(self, text: str) -> str:
        """Text with trailing emphasis markers removed."""
        if self == Markup.PLAIN:
            return text
        return text.rstrip("*")
