"""
A collection of notes that typed header handlers can emit.

PLEASE NOTE: variables interpolated into the summary are HTML escaped by show_summary(), so it can
contain arbitrary text (as long as it's unicode).

The longer text field is Markdown; variables interpolated into it are escaped before rendering.
"""

from binascii import b2a_hex
from enum import Enum
from typing import Any, Dict, Union

from markdown import markdown
from markupsafe import Markup, escape


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    VALIDATION = "Validation"


class levels(Enum):
    "Note levels."
    GOOD = "good"
    WARN = "warning"
    BAD = "bad"
    INFO = "info"


class Note:
    """
    A note about an HTTP header field value.
    """

    category = None  # type: categories
    level = None  # type: levels
    summary = ""
    text = ""

    def __init__(self, subject: str, vrs: Dict[str, Union[str, int]] = None) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject} {self.vars!r}>"

    def plain_summary(self) -> str:
        "The summary with variables interpolated and no escaping."
        return self.summary % self.vars

    def show_summary(self) -> Markup:
        """
        Output a textual summary of the message as a Unicode string.

        Interpolated variables are HTML escaped.
        """
        return Markup(self.summary) % self.vars

    def show_text(self) -> Markup:
        """
        Show the HTML text for the message as a Unicode string.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )


def display_bytes(inbytes: bytes, encoding: str = "utf-8", truncate: int = 40) -> str:
    """
    Format arbitrary input bytes for display.

    Printable Unicode characters are displayed without modification;
    everything else is shown as escaped hex.
    """
    instr = inbytes.decode(encoding, "backslashreplace")
    out = []
    for char in instr[:truncate]:
        if not char.isprintable():
            char = r"\x%s" % b2a_hex(char.encode(encoding)).decode("ascii")
        out.append(char)
    return "".join(out)
