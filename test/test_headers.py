#!/usr/bin/env python3

import unittest
from typing import List

import typed_headers.headers as headers
from typed_headers.headers import HeaderBlock, HeaderProcessor, TypedHeader
from typed_headers.headers.content_md5 import content_md5
from typed_headers.speak import Note


class HeaderBlockTest(unittest.TestCase):
    def setUp(self) -> None:
        self.block = HeaderBlock(
            [
                (b"Content-Type", b"text/plain"),
                (b"content-md5", b"Q2hlY2sgSW50ZWdyaXR5IQ=="),
                (b"Cache-Control", b"max-age=60"),
                (b"CONTENT-MD5 ", b"1B2M2Y8AsgTpgAmY7PhCfg=="),
            ]
        )
        self.notes: List[Note] = []

    def add_note(self, note: type, **kw: str) -> None:
        self.notes.append(note("test", kw))

    def test_get_all(self) -> None:
        i = 0
        for (name, expected) in [
            ("Content-MD5", [b"Q2hlY2sgSW50ZWdyaXR5IQ==", b"1B2M2Y8AsgTpgAmY7PhCfg=="]),
            ("content-type", [b"text/plain"]),
            ("Etag", []),
        ]:
            self.assertEqual(expected, self.block.get_all(name), f"[{i}] {name}")
            i += 1

    def test_decode_duplicate(self) -> None:
        with self.assertRaises(headers.DuplicateValue):
            self.block.decode(content_md5, self.add_note)
        self.assertEqual(
            ["HEADER_DEPRECATED"], [n.__class__.__name__ for n in self.notes]
        )

    def test_decode_missing(self) -> None:
        block = HeaderBlock([(b"Content-Type", b"text/plain")])
        with self.assertRaises(headers.MissingValue):
            block.decode(content_md5, self.add_note)
        self.assertEqual([], self.notes)

    def test_decode(self) -> None:
        block = HeaderBlock([(b"Content-MD5", b"Q2hlY2sgSW50ZWdyaXR5IQ==")])
        md5 = block.decode(content_md5, self.add_note)
        self.assertEqual(b"Check Integrity!", md5.digest)
        self.assertEqual(1, len(self.notes))
        self.assertEqual(
            content_md5.deprecation_ref, self.notes[0].vars["deprecation_ref"]
        )

    def test_decode_without_notes(self) -> None:
        block = HeaderBlock([(b"Content-MD5", b"Q2hlY2sgSW50ZWdyaXR5IQ==")])
        self.assertEqual(b"Check Integrity!", block.decode(content_md5).digest)

    def test_encode(self) -> None:
        block = HeaderBlock()
        block.encode(content_md5(b"Check Integrity!"))
        self.assertEqual(1, len(block))
        self.assertEqual([(b"Content-MD5", b"Q2hlY2sgSW50ZWdyaXR5IQ==")], list(block))

    def test_append_bad_name(self) -> None:
        i = 0
        for name in ["Content MD5", "Content-MD5:", "", "Content-MD5\n", "Contént-MD5"]:
            with self.assertRaises(ValueError, msg=f"[{i}] {name!r}"):
                self.block.append(name, b"foo")
            i += 1
        self.assertEqual(4, len(self.block))


class HeaderProcessorTest(unittest.TestCase):
    def test_find_header_handler(self) -> None:
        i = 0
        for (name, expected) in [
            ("Content-MD5", content_md5),
            ("content-md5", content_md5),
            (" CONTENT-MD5 ", content_md5),
            ("Content-Length", None),
            ("_notes", None),
            ("-notes", None),
            ("", None),
        ]:
            self.assertIs(
                expected, HeaderProcessor.find_header_handler(name), f"[{i}] {name!r}"
            )
            i += 1

    def test_name_token(self) -> None:
        self.assertEqual("content_md5", HeaderProcessor.name_token("Content-MD5"))


class HeaderErrorTest(unittest.TestCase):
    def test_notes(self) -> None:
        i = 0
        for (error, vrs, summary) in [
            (headers.MissingValue, {}, "The Foo header is missing."),
            (
                headers.DuplicateValue,
                {"count": 2},
                "Only one Foo header is allowed in a message.",
            ),
            (
                headers.InvalidEncoding,
                {"value": "<b>", "ref_uri": "http://example.com/"},
                "The Foo header's syntax isn't valid.",
            ),
            (
                headers.InvalidLength,
                {"digest_length": 3, "ref_uri": "http://example.com/"},
                "The Foo header's digest is 3 bytes long.",
            ),
        ]:
            exc = error("Foo", **vrs)
            self.assertIsInstance(exc, ValueError)
            self.assertEqual(summary, str(exc), f"[{i}]")
            self.assertEqual("header-foo", exc.note.subject)
            self.assertIsInstance(exc.note, error.note_cls)
            self.assertTrue(exc.note.show_text(), f"[{i}]")
            i += 1

    def test_generic(self) -> None:
        exc = headers.HeaderError("Foo")
        self.assertIsInstance(exc, ValueError)
        self.assertEqual("The Foo header's value isn't valid.", str(exc))
        self.assertIsInstance(exc.note, headers.HEADER_INVALID)
        self.assertTrue(exc.note.show_text())

    def test_text_escaped(self) -> None:
        exc = headers.InvalidEncoding(
            "Foo", value="<script>", ref_uri="http://example.com/"
        )
        self.assertNotIn("<script>", exc.note.show_text())


class HeaderCoverageTest(unittest.TestCase):
    """
    Make sure each header handler is complete.
    """

    checks = [
        ("canonical_name", str),
        ("reference", str),
        ("description", str),
        ("syntax", str),
        ("valid_in_requests", bool),
        ("valid_in_responses", bool),
        ("deprecated", bool),
    ]

    def test_handlers(self) -> None:
        for header_cls in TypedHeader.__subclasses__():
            header_name = header_cls.__name__
            if header_name in ["unfinished", "echo"]:
                continue
            for (attr_name, attr_type) in self.checks:
                self.assertIsInstance(
                    getattr(header_cls, attr_name),
                    attr_type,
                    f"{header_name} {attr_name}",
                )
            self.assertIs(
                header_cls, HeaderProcessor.find_header_handler(header_cls.canonical_name)
            )
            tests = unittest.TestLoader().loadTestsFromModule(
                HeaderProcessor.find_header_module(header_cls.canonical_name)
            )
            self.assertGreater(tests.countTestCases(), 0, header_name)


class TypedHeaderTest(unittest.TestCase):
    def test_strip_ows(self) -> None:
        class echo(TypedHeader):
            canonical_name = "Echo"

            @classmethod
            def parse(cls, field_value: str) -> str:  # type: ignore
                return field_value

        i = 0
        for (value, expected) in [
            (b"foo", "foo"),
            (b" \tfoo bar\t ", "foo bar"),
            ("\t\t", ""),
            (b"foo\n", "foo\n"),
            (b"\r\nfoo", "\r\nfoo"),
        ]:
            self.assertEqual(expected, echo.decode([value]), f"[{i}] {value!r}")
            i += 1

    def test_abstract(self) -> None:
        class unfinished(TypedHeader):
            canonical_name = "Unfinished"

        with self.assertRaises(NotImplementedError):
            unfinished.decode([b"foo"])
        with self.assertRaises(NotImplementedError):
            unfinished().format()
        self.assertEqual("unfinished", unfinished.name())


if __name__ == "__main__":
    unittest.main()
