"""
Regex for RFC4648

The base64 alphabet and padding rules from RFC4648 section 4:

  <https://tools.ietf.org/html/rfc4648#section-4>

RFC4648 has no ABNF; these follow its prose. They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc5234 import ALPHA, DIGIT

SPEC_URL = "https://tools.ietf.org/html/rfc4648"


# base64-char = ALPHA / DIGIT / "+" / "/"

base64_char = rf"(?: {ALPHA} | {DIGIT} | \+ | / )"

# base64-pad = "="

base64_pad = r"="

# base64-quad = 4base64-char

base64_quad = rf"(?: {base64_char}{{4}} )"

# base64-final = 2base64-char 2base64-pad / 3base64-char base64-pad

base64_final = rf"(?: {base64_char}{{2}} {base64_pad}{{2}} | {base64_char}{{3}} {base64_pad} )"

# base64 = *base64-quad [ base64-final ]

base64 = rf"(?: {base64_quad}* {base64_final}? )"
