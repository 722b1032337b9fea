from base64 import b64decode, b64encode
import logging
import re
from typing import Any

from typed_headers import headers
from typed_headers.speak import display_bytes
from typed_headers.syntax import rfc1864, rfc4648

log = logging.getLogger(__name__)

DIGEST_LENGTH = 16


class content_md5(headers.TypedHeader):
    """
    A Content-MD5 header; holds the 16 bytes of an MD5 digest.

    Instances can't be modified once created.
    """

    canonical_name = "Content-MD5"
    description = """\
The `Content-MD5` header is an MD5 digest of the body, and provides an end-to-end message integrity
check (MIC).

Note that while a MIC is good for detecting accidental modification of the body in transit, it is
not proof against malicious attacks."""
    reference = rfc1864.SPEC_URL
    syntax = rfc1864.Content_MD5
    deprecated = True
    deprecation_ref = "https://tools.ietf.org/html/rfc7231#appendix-B"
    valid_in_requests = True
    valid_in_responses = True

    digest: bytes

    def __init__(self, digest: bytes) -> None:
        digest = bytes(digest)
        if len(digest) != DIGEST_LENGTH:
            raise headers.InvalidLength(
                self.canonical_name, digest_length=len(digest), ref_uri=self.reference
            )
        object.__setattr__(self, "digest", digest)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, content_md5):
            return NotImplemented
        return self.digest == other.digest

    def __hash__(self) -> int:
        return hash(self.digest)

    def __repr__(self) -> str:
        return f"<{self.canonical_name} {self.hexdigest()}>"

    @classmethod
    def parse(cls, field_value: str) -> "content_md5":
        if not re.fullmatch(rfc4648.base64, field_value, re.VERBOSE):
            log.debug("%s: not base64: %r", cls.canonical_name, field_value)
            raise headers.InvalidEncoding(
                cls.canonical_name,
                value=display_bytes(field_value.encode("utf-8")),
                ref_uri=cls.reference,
            )
        digest = b64decode(field_value, validate=True)
        if len(digest) != DIGEST_LENGTH:
            log.debug("%s: %d byte digest", cls.canonical_name, len(digest))
            raise headers.InvalidLength(
                cls.canonical_name, digest_length=len(digest), ref_uri=cls.reference
            )
        return cls(digest)

    def format(self) -> str:
        return b64encode(self.digest).decode("ascii")

    def hexdigest(self) -> str:
        "The digest as lowercase hex."
        return self.digest.hex()


class ContentMD5Test(headers.HeaderTest):
    name = "Content-MD5"
    inputs = [b"Q2hlY2sgSW50ZWdyaXR5IQ=="]
    expected_out = "Q2hlY2sgSW50ZWdyaXR5IQ=="
    expected_notes = [headers.HEADER_DEPRECATED]


class ContentMD5SpaceTest(headers.HeaderTest):
    name = "Content-MD5"
    inputs = [b" \tQ2hlY2sgSW50ZWdyaXR5IQ== "]
    expected_out = "Q2hlY2sgSW50ZWdyaXR5IQ=="
    expected_notes = [headers.HEADER_DEPRECATED]


class ContentMD5CaseTest(headers.HeaderTest):
    name = "content-md5"
    inputs = [b"1B2M2Y8AsgTpgAmY7PhCfg=="]
    expected_out = "1B2M2Y8AsgTpgAmY7PhCfg=="
    expected_notes = [headers.HEADER_DEPRECATED]


class ContentMD5MissingTest(headers.HeaderTest):
    name = "Content-MD5"
    inputs = []  # type: ignore
    expected_err = headers.MissingValue


class ContentMD5RepeatTest(headers.HeaderTest):
    name = "Content-MD5"
    inputs = [b"Q2hlY2sgSW50ZWdyaXR5IQ==", b"Q2hlY2sgSW50ZWdyaXR5IQ=="]
    expected_err = headers.DuplicateValue
    expected_notes = [headers.HEADER_DEPRECATED]


class ContentMD5BadCharsTest(headers.HeaderTest):
    name = "Content-MD5"
    inputs = [b"not-base64-!!"]
    expected_err = headers.InvalidEncoding
    expected_notes = [headers.HEADER_DEPRECATED]


class ContentMD5UnpaddedTest(headers.HeaderTest):
    name = "Content-MD5"
    inputs = [b"Q2hlY2sgSW50ZWdyaXR5IQ"]
    expected_err = headers.InvalidEncoding
    expected_notes = [headers.HEADER_DEPRECATED]


class ContentMD5NonAsciiTest(headers.HeaderTest):
    name = "Content-MD5"
    inputs = [b"Q2hlY2sgSW50ZWdyaXR5\xc3\xa9=="]
    expected_err = headers.InvalidEncoding
    expected_notes = [headers.HEADER_DEPRECATED]


class ContentMD5ShortTest(headers.HeaderTest):
    name = "Content-MD5"
    inputs = [b64encode(b"\x00" * 15)]
    expected_err = headers.InvalidLength
    expected_notes = [headers.HEADER_DEPRECATED]


class ContentMD5LongTest(headers.HeaderTest):
    name = "Content-MD5"
    inputs = [b64encode(b"\xff" * 17)]
    expected_err = headers.InvalidLength
    expected_notes = [headers.HEADER_DEPRECATED]
