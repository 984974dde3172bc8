"""Raw-content URL derivation for repository web URLs."""

import re

RAW_URL_REPLACEMENTS = {
    "github.com": "raw.githubusercontent.com",
    "/tree/": "/",
}

# Longest pattern first so each position prefers the longest match.
_RAW_URL_PATTERN = re.compile(
    "|".join(re.escape(p) for p in sorted(RAW_URL_REPLACEMENTS, key=len, reverse=True))
)


def raw_url(web_url: str) -> str:
    """
    Derive the raw-content URL from a web-facing repository URL.

    Replacements happen in a single left-to-right pass, so replaced text is
    never scanned again. No validation is done: a URL containing neither
    pattern is returned unchanged.

    Example:
        >>> raw_url("https://github.com/a/b/tree/main/c")
        'https://raw.githubusercontent.com/a/b/main/c'
    """
    return _RAW_URL_PATTERN.sub(lambda m: RAW_URL_REPLACEMENTS[m.group(0)], web_url)
