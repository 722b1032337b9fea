"""
Common header-related Notes.
"""

from typed_headers.speak import Note, categories, levels


class HEADER_INVALID(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "The %(field_name)s header's value isn't valid."
    text = """\
The value supplied for the `%(field_name)s` header couldn't be converted."""


class HEADER_MISSING(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "The %(field_name)s header is missing."
    text = """\
No value was supplied for the `%(field_name)s` header, so there is nothing to decode."""


class SINGLE_HEADER_REPEAT(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "Only one %(field_name)s header is allowed in a message."
    text = """\
This header is designed to only occur once in a message, but %(count)s instances were present.
When it occurs more than once, a receiver needs to choose the one to use, which can lead to
interoperability problems, since different implementations may make different choices.

Rather than choose one, the whole field is rejected."""


class BAD_SYNTAX(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "The %(field_name)s header's syntax isn't valid."
    text = """\
The value for this header (`%(value)s`) doesn't conform to its specified syntax; see [its
definition](%(ref_uri)s) for more information."""


class BAD_DIGEST_LENGTH(Note):
    category = categories.VALIDATION
    level = levels.BAD
    summary = "The %(field_name)s header's digest is %(digest_length)s bytes long."
    text = """\
An MD5 digest is always 16 bytes long; its base64 encoding is 24 characters, ending in `==`. The
value of this header decoded to %(digest_length)s bytes, so it can't be an MD5 digest. See [its
definition](%(ref_uri)s) for more information."""


class HEADER_DEPRECATED(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The %(field_name)s header is deprecated."
    text = """\
This header field is no longer recommended for use, because of interoperability problems and/or
lack of use. See [the deprecation notice](%(deprecation_ref)s) for more information."""
