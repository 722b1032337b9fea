#!/usr/bin/env python

"""
Typed HTTP header handlers.

A typed header converts between the raw field values of one header and a value in memory.
HeaderBlock holds a list of (bytes name, bytes value) tuples and routes matching values to a
handler; HeaderProcessor finds the handler for a field name.
"""

import logging
import re
import sys
from typing import (
    Any,
    Iterator,
    List,
    Optional,
    Type,
    TypeVar,
    Union,
)
import unittest

from typed_headers.speak import Note, display_bytes
from typed_headers.syntax import rfc7230
from typed_headers.type import (
    AddNoteMethodType,
    HeaderValueSink,
    RawHeaderListType,
    RawHeaderValuesType,
)

from ._notes import *

log = logging.getLogger(__name__)

RE_FLAGS = re.VERBOSE | re.IGNORECASE

OWS_VALUE = re.compile(
    rf"{rfc7230.OWS} (.*?) {rfc7230.OWS}", re.VERBOSE | re.DOTALL
)

THeader = TypeVar("THeader", bound="TypedHeader")


class HeaderError(ValueError):
    """
    A field value that can't be converted by its typed header.

    Subclasses name the Note that explains the problem; it's available as the note attribute.
    """

    note_cls: Type[Note] = HEADER_INVALID

    def __init__(self, field_name: str, **vrs: Union[str, int]) -> None:
        self.field_name = field_name
        self.note = self.note_cls(
            f"header-{field_name.lower()}", dict(field_name=field_name, **vrs)
        )
        ValueError.__init__(self, self.note.plain_summary())


class MissingValue(HeaderError):
    "No field value was supplied."
    note_cls = HEADER_MISSING


class DuplicateValue(HeaderError):
    "More than one field value was supplied for a singleton header."
    note_cls = SINGLE_HEADER_REPEAT


class InvalidEncoding(HeaderError):
    "The field value doesn't match its syntax."
    note_cls = BAD_SYNTAX


class InvalidLength(HeaderError):
    "The field value decoded to the wrong number of bytes."
    note_cls = BAD_DIGEST_LENGTH


class TypedHeader:
    """
    A HTTP header that can only occur once, with a typed value.

    Subclasses implement parse() and format().
    """

    canonical_name: str = None
    description: str = None
    reference: str = None
    syntax: str = None  # Verbose regular expression to match.
    deprecated: bool = None
    valid_in_requests: bool = None
    valid_in_responses: bool = None

    @classmethod
    def name(cls) -> str:
        "The field name, lowercase-normalised."
        return cls.canonical_name.lower()

    @classmethod
    def decode(cls: Type[THeader], values: RawHeaderValuesType) -> THeader:
        """
        Given the field values for this header, return an instance.

        Raises MissingValue or DuplicateValue unless there is exactly one value; the value itself
        is handed to parse().
        """
        field_values = list(values)
        if not field_values:
            log.debug("%s: no value", cls.canonical_name)
            raise MissingValue(cls.canonical_name)
        if len(field_values) > 1:
            log.debug("%s: %d values", cls.canonical_name, len(field_values))
            raise DuplicateValue(cls.canonical_name, count=len(field_values))
        field_value = field_values[0]
        if isinstance(field_value, (bytes, bytearray)):
            try:
                str_value = field_value.decode("ascii", "strict")
            except UnicodeError:
                log.debug("%s: non-ASCII value", cls.canonical_name)
                raise InvalidEncoding(
                    cls.canonical_name,
                    value=display_bytes(field_value),
                    ref_uri=cls.reference,
                ) from None
        else:
            str_value = field_value
        return cls.parse(OWS_VALUE.fullmatch(str_value).group(1))

    @classmethod
    def parse(cls: Type[THeader], field_value: str) -> THeader:
        "Given a string value stripped of surrounding whitespace, parse and return an instance."
        raise NotImplementedError

    def format(self) -> str:
        "Return the field value for this instance."
        raise NotImplementedError

    def encode(self, values: HeaderValueSink) -> None:
        "Append exactly one field value to values."
        values.append(self.format().encode("ascii"))

    def __str__(self) -> str:
        return self.format()


class HeaderBlock:
    """
    An ordered list of raw header fields.
    """

    def __init__(self, headers: RawHeaderListType = None) -> None:
        self.headers: RawHeaderListType = list(headers or [])

    def __iter__(self) -> Iterator:
        return iter(self.headers)

    def __len__(self) -> int:
        return len(self.headers)

    def get_all(self, field_name: str) -> List[bytes]:
        "Return the values of every field matching field_name, in order."
        norm_name = field_name.lower()
        return [
            value
            for name, value in self.headers
            if name.strip().decode("ascii", "replace").lower() == norm_name
        ]

    def append(self, field_name: str, value: bytes) -> None:
        """
        Append a field to the block.

        Raises ValueError if field_name isn't a valid HTTP field-name.
        """
        if not re.fullmatch(rfc7230.field_name, field_name, RE_FLAGS):
            raise ValueError(f'"{field_name}" is not a valid header field-name.')
        self.headers.append((field_name.encode("ascii"), value))

    def decode(
        self, header_cls: Type[THeader], add_note: AddNoteMethodType = None
    ) -> THeader:
        """
        Decode the values for header_cls in this block.

        If add_note is given, it's called with notes that don't prevent decoding.
        """
        values = self.get_all(header_cls.canonical_name)
        if values and header_cls.deprecated and add_note is not None:
            deprecation_ref = getattr(
                header_cls, "deprecation_ref", header_cls.reference
            )
            add_note(
                HEADER_DEPRECATED,
                field_name=header_cls.canonical_name,
                deprecation_ref=deprecation_ref,
            )
        return header_cls.decode(values)

    def encode(self, header: TypedHeader) -> None:
        "Append the values of header to this block, under its canonical name."
        values: List[bytes] = []
        header.encode(values)
        for value in values:
            self.append(header.canonical_name, value)


class HeaderProcessor:
    """
    Finds typed header handlers by field name.
    """

    @staticmethod
    def find_header_handler(header_name: str) -> Optional[Type[TypedHeader]]:
        """
        Return a header handler class for the given field name, or None if one isn't found.
        """
        name_token = HeaderProcessor.name_token(header_name)
        hdr_module = HeaderProcessor.find_header_module(name_token)
        if hdr_module and hasattr(hdr_module, name_token):
            return getattr(hdr_module, name_token)  # type: ignore
        return None

    @staticmethod
    def find_header_module(header_name: str) -> Any:
        """
        Return a module for the given field name, or None if it can't be found.
        """
        name_token = HeaderProcessor.name_token(header_name)
        if not name_token or name_token[0] == "_":  # these are special
            return None
        try:
            module_name = f"typed_headers.headers.{name_token}"
            __import__(module_name)
            return sys.modules[module_name]
        except (ImportError, KeyError, TypeError):
            return None

    @staticmethod
    def name_token(header_name: str) -> str:
        """
        Return a tokenised, python-friendly name for a header.
        """
        return header_name.strip().replace("-", "_").lower()


class HeaderTest(unittest.TestCase):
    """
    Testing machinery for headers.
    """

    name: str = None
    inputs: List[bytes] = []
    expected_out: Any = None
    expected_err: Type[HeaderError] = None
    expected_notes: List[Type[Note]] = []

    def setUp(self) -> None:
        "Test setup."
        self.notes: List[Note] = []

    def add_note(self, note: Type[Note], **kw: Union[str, int]) -> None:
        "Record the notes set."
        self.notes.append(note("test", kw))

    def test_header(self) -> Any:
        "Test the header."
        if not self.name:
            return self.skipTest("")
        header_cls = HeaderProcessor.find_header_handler(self.name)
        self.assertIsNotNone(header_cls, "HEADER HANDLER NOT FOUND")
        block = HeaderBlock([(self.name.encode("ascii"), inp) for inp in self.inputs])
        if self.expected_err:
            with self.assertRaises(self.expected_err) as caught:
                block.decode(header_cls, self.add_note)
            self.notes.append(caught.exception.note)
        else:
            out = block.decode(header_cls, self.add_note)
            self.assertEqual(self.expected_out, out.format())
            out_block = HeaderBlock()
            out_block.encode(out)
            self.assertEqual(out, out_block.decode(header_cls))
        expected = [n.__name__ for n in self.expected_notes]
        if self.expected_err:
            expected.append(self.expected_err.note_cls.__name__)
        diff = set(expected).symmetric_difference(
            {n.__class__.__name__ for n in self.notes}
        )
        for note in self.notes:  # check formatting
            self.assertTrue(note.show_summary())
            self.assertTrue(note.show_text())
        self.assertEqual(len(diff), 0, f"Mismatched notes: {diff}")
        return None
