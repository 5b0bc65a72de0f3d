"""
Structural URL risk scoring.

A URL that cannot be parsed at all is itself treated as evidence: it scores
the maximum with a single reason and no other check runs.
"""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import SplitResult, urlsplit

from scamscope.core.reasons import ReasonSet
from scamscope.core.risk import MAX_SCORE, clamp_score

SECURE_SCHEME = "https"
SENSITIVE_PATH_RE = re.compile(r"/(login|signin|verify|confirm|payment|checkout)", re.I)
IPV4_HOST_RE = re.compile(r"^\d{1,3}(?:\.\d{1,3}){3}$")
# registered-name characters allowed in a host (RFC 3986 reg-name, minus pct-encoding oddities)
HOST_CHARS_RE = re.compile(r"^[a-z0-9._~!$&'()*+,;=%-]+$")
SUSPICIOUS_TLDS = (".xyz", ".info", ".top", ".pw", ".ga", ".cf")

W_INSECURE = 30
W_SENSITIVE_PATH = 15
W_RAW_IP = 20
W_SUSPICIOUS_TLD = 20

R_MALFORMED = "Invalid or malformed URL"
R_INSECURE = "Not using HTTPS"
R_SENSITIVE_PATH = "Login/verify path"
R_RAW_IP = "Raw IP address used as host"
R_SUSPICIOUS_TLD = "Suspicious TLD"


@dataclass(frozen=True)
class UrlSignals:
    url: str
    score: int
    reasons: Tuple[str, ...]


def _valid_host(host: str, netloc: str) -> bool:
    if "[" in netloc:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True
    return bool(HOST_CHARS_RE.match(host))


def parse_url(url: str) -> Optional[SplitResult]:
    """
    Split a URL into components, or return None when it is not a usable
    absolute URL (no scheme, no host, whitespace or bad characters in the
    host, bad port).
    """
    s = (url or "").strip()
    if not s:
        return None
    try:
        parts = urlsplit(s)
        host = parts.hostname
        parts.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError:
        return None
    if not parts.scheme or not host:
        return None
    # spaces are tolerated in path/query, never in scheme or authority
    if any(ch.isspace() for ch in parts.scheme + parts.netloc):
        return None
    if not _valid_host(host, parts.netloc):
        return None
    return parts


def is_ipv4_host(host: str) -> bool:
    return bool(IPV4_HOST_RE.match(host or ""))


def score_url(url: str) -> UrlSignals:
    parts = parse_url(url)
    if parts is None:
        return UrlSignals(url=url, score=MAX_SCORE, reasons=(R_MALFORMED,))

    score = 0
    reasons = ReasonSet()
    host = (parts.hostname or "").lower()

    if parts.scheme.lower() != SECURE_SCHEME:
        score += W_INSECURE
        reasons.add(R_INSECURE)

    if SENSITIVE_PATH_RE.search(parts.path or ""):
        score += W_SENSITIVE_PATH
        reasons.add(R_SENSITIVE_PATH)

    if is_ipv4_host(host):
        score += W_RAW_IP
        reasons.add(R_RAW_IP)

    for tld in SUSPICIOUS_TLDS:
        if host.endswith(tld):
            score += W_SUSPICIOUS_TLD
            reasons.add(R_SUSPICIOUS_TLD)

    return UrlSignals(url=url, score=clamp_score(score), reasons=reasons.as_tuple())
