"""
URL scanner — finds URL-like words in free text.

A word counts as a URL when it has a scheme (``https://laptop``) or when it
looks like ``host.tld/path`` with a known top-level domain, so prose such as
``shut.the.front.door`` is not picked up.
"""
from __future__ import annotations

import re
from typing import TextIO

from .utils import strip_ansi

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://\S+$")
_HOST_RE = re.compile(r"^(?:[a-zA-Z0-9](?:[a-zA-Z0-9\-]*[a-zA-Z0-9])?\.)+([a-zA-Z]{2,})(?::\d+)?(?:[/?#]\S*)?$")

_OPENERS = "<([{\"'`"
_CLOSERS = ">)]}\"'`"
_TRAILING_PUNCTUATION = ".,;:!?"

TOP_LEVEL_DOMAINS: frozenset[str] = frozenset("""
    com org net edu gov mil int info biz name pro aero coop museum mobi asia tel travel jobs cat
    io ai app dev co me tv cc ly fm gg sh to xyz site online tech store blog cloud page link
    uk us ca au nz de fr es it nl be ch at se no dk fi ie pl pt cz ru ua jp cn kr in br mx ar
    za sg hk tw il tr gr hu ro eu
""".split())


def _strip_token(token: str) -> str:
    prev = None
    while token and token != prev:
        prev = token
        token = token.lstrip(_OPENERS)
        token = token.rstrip(_CLOSERS)
        token = token.rstrip(_TRAILING_PUNCTUATION)
    return token


def is_url(token: str) -> bool:
    """Whether a single, already stripped word looks like a URL."""
    if _SCHEME_RE.match(token):
        return True
    m = _HOST_RE.match(token)
    if not m:
        return False
    return m.group(1).lower() in TOP_LEVEL_DOMAINS


def scan(source: str | TextIO) -> list[str]:
    """Return the URLs in ``source`` in order of first appearance, without repeats."""
    text = source if isinstance(source, str) else source.read()
    text = strip_ansi(text)
    urls: list[str] = []
    seen: set[str] = set()
    for word in text.split():
        token = _strip_token(word)
        if not token or token in seen or not is_url(token):
            continue
        seen.add(token)
        urls.append(token)
    return urls
