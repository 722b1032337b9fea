"""
Regex for RFC1864

The Content-MD5 header field from RFC1864 section 2:

  <https://tools.ietf.org/html/rfc1864>

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc4648 import base64_char, base64_pad

SPEC_URL = "https://tools.ietf.org/html/rfc1864"


# Content-MD5 = <base64 of 128 bit MD5 digest as per RFC 1864>

Content_MD5 = rf"(?: {base64_char}{{22}} {base64_pad}{{2}} )"
