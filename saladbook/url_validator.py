"""Validator that rejects words which look like URLs."""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

from .models import ValidationError

_MAX_URL_LENGTH = 2083
_MIN_URL_BYTES = 3

_NS = r"[^\t\n\f\r ]"
_HEX4 = "[0-9a-fA-F]{1,4}"
_OCTET = r"(?:25[0-5]|(?:2[0-4]|1?[0-9])?[0-9])"
_IPV6 = "(?:" + "|".join(
    [
        rf"(?:{_HEX4}:){{7}}{_HEX4}",
        rf"(?:{_HEX4}:){{1,7}}:",
        rf"(?:{_HEX4}:){{1,6}}:{_HEX4}",
        rf"(?:{_HEX4}:){{1,5}}(?::{_HEX4}){{1,2}}",
        rf"(?:{_HEX4}:){{1,4}}(?::{_HEX4}){{1,3}}",
        rf"(?:{_HEX4}:){{1,3}}(?::{_HEX4}){{1,4}}",
        rf"(?:{_HEX4}:){{1,2}}(?::{_HEX4}){{1,5}}",
        rf"{_HEX4}:(?::{_HEX4}){{1,6}}",
        rf":(?:(?::{_HEX4}){{1,7}}|:)",
        r"fe80:(?::[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]+",
        rf"::(?:ffff(?::0{{1,4}})?:)?(?:{_OCTET}\.){{3}}{_OCTET}",
        rf"(?:{_HEX4}:){{1,4}}:(?:{_OCTET}\.){{3}}{_OCTET}",
    ]
) + ")"
_IPV4 = (
    r"(?:[1-9][0-9]?|1[0-9][0-9]|2[01][0-9]|22[0-3]|24[0-9]|25[0-5])"
    r"(?:\.(?:[0-9]{1,2}|1[0-9][0-9]|2[0-4][0-9]|25[0-5])){2}"
    r"(?:\.(?:[0-9][0-9]?|1[0-9][0-9]|2[0-4][0-9]|25[0-5]))"
)
_ALNUM = "[a-zA-Z0-9]"
_WIDE = r"[a-zA-Z\u00a1-\uffff0-9]"
_LABELS = rf"{_ALNUM}[a-zA-Z0-9\-_]*{_ALNUM}(?:[\-.]{_ALNUM}+)*"
_SUBDOMAIN = rf"(?:www\.|{_ALNUM}(?:[\-_.]?{_ALNUM})+\.{_ALNUM}+)"
_NAME = rf"{_WIDE}+(?:--?{_WIDE}+)*"
_TLD = r"[a-zA-Z\u00a1-\uffff]+"

_URL = re.compile(
    r"(?:(?:ftp|tcp|udp|wss?|https?)://)?"
    rf"(?:{_NS}+(?::{_NS}*)?@)?"
    rf"(?:{_IPV4}|\[{_IPV6}\]|(?:{_LABELS}|{_SUBDOMAIN})?{_NAME}(?:\.{_TLD})?)"
    rf"\.?(?::[0-9]{{1,5}})?(?:[/?#]{_NS}*)?"
)

_BAD_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")
_ASCII_ALNUM = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)
_USERINFO_CHARS = _ASCII_ALNUM | frozenset("-._:~!$&'()*+,;=%@")
_HOST_CHARS = _ASCII_ALNUM | frozenset("-_.~!$&'()*+,;=:[]<>\"%")


def _valid_optional_port(port: str) -> bool:
    return port == "" or (port[0] == ":" and all(c in "0123456789" for c in port[1:]))


def _parses(candidate: str) -> bool:
    """Tell whether *candidate* is well-formed enough to be split into URL parts."""
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return False
    userinfo, _, host = parts.netloc.rpartition("@")
    if any(ch not in _USERINFO_CHARS for ch in userinfo):
        return False
    if any(ord(ch) < 0x80 and ch not in _HOST_CHARS for ch in host):
        return False
    if host.startswith("["):
        closing = host.rfind("]")
        if closing < 0 or not _valid_optional_port(host[closing + 1 :]):
            return False
    elif ":" in host and not _valid_optional_port(host[host.rfind(":") :]):
        return False
    if _BAD_ESCAPE.search(host + parts.path + parts.fragment):
        return False
    if host.startswith("."):
        return False
    if not host and parts.path and "." not in parts.path:
        return False
    return True


def is_url(text: str) -> bool:
    """Return True if *text* looks like a URL, with or without a scheme."""
    if (
        not text
        or len(text) >= _MAX_URL_LENGTH
        or len(text.encode("utf-8", "surrogatepass")) <= _MIN_URL_BYTES
        or text.startswith(".")
    ):
        return False
    candidate = text
    if ":" in text and "://" not in text:
        candidate = "http://" + text
    if not _parses(candidate):
        return False
    return _URL.fullmatch(text) is not None


class UrlValidatorService:
    """Rejects single words that are URLs."""

    def __init__(self, logger: logging.Logger) -> None:
        self._log = logger

    def verify(self, word: str) -> None:
        """Raise ValidationError if *word* is several words or a URL."""
        if len(word.split()) > 1:
            self._log.warning("verifying url: accepts only 1 word")
            raise ValidationError("verifying url: accepts only 1 word")
        if is_url(word):
            self._log.warning("verifying url: found %s", word)
            raise ValidationError(f"verifying url: found {word}")