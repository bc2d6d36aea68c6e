"""Whitespace cleanup for generated replies."""

import re

# ECMAScript WhiteSpace and LineTerminator code points, the set JS trim() removes
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_BLANK_RUN = re.compile(r"\n{3,}")


def normalize_reply(text: str) -> str:
    """Tidy a generated reply before it is stored.

    Strips boundary whitespace (the TRIM_CHARS set, not str.isspace), drops
    every carriage return and collapses runs of three or more newlines to a
    single blank line. Applying it twice gives the same result as applying
    it once.
    """
    text = text.strip(TRIM_CHARS).replace("\r", "")
    return _BLANK_RUN.sub("\n\n", text)
