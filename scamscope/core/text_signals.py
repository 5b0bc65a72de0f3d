"""
Deterministic Text Signal Scoring
---------------------------------
Scores a single piece of natural-language text (typed message, voice
transcript or OCR output) against weighted scam indicators.

Each category contributes its weight once when it matches and records one
human-readable reason. The keyword category is the exception: every distinct
keyword found adds its own weight and its own reason. Category weights stack;
the total is clamped to [0, 100].
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from scamscope.core.errors import InputValidationError
from scamscope.core.reasons import ReasonSet
from scamscope.core.risk import clamp_score


# -----------------------------
# Phrase lists (substring match on lowercased text)
# -----------------------------
LOTTERY_PHRASES = (
    "you have won",
    "won a lottery",
    "winner",
    "lucky draw",
    "prize",
    "reward",
    "congratulations you have won",
    "claim your prize",
    "won an amount",
    "sudden lottery",
    "you are the winner",
    "selected winner",
)

FINANCIAL_DETAIL_PHRASES = (
    "upi",
    "bank details",
    "account details",
    "send your bank",
    "provide your bank",
    "share your bank",
    "give me your bank",
    "send your upi",
    "provide account details",
    "transaction details",
    "pay details",
    "account number",
)

ADVANCE_FEE_PHRASES = (
    "processing fee",
    "claim fee",
    "transfer to receive",
    "exchange the money",
    "fee to release",
    "pay small fee",
    "release the amount",
)

SUSPICIOUS_KEYWORDS = (
    "urgent",
    "immediately",
    "verify",
    "otp",
    "click",
    "password",
)

# -----------------------------
# Regex indicators
# -----------------------------
LARGE_SUM_RE = re.compile(r"[$₹]\s*\d{3,}|\d{4,}\s*(?:usd|inr|rs|rupees|₹)?", re.I)
TRANSFER_PROMISE_RE = re.compile(
    r"send you the amount|send the amount|i will send you|i can send you|transfer to you|to receive the amount",
    re.I,
)
SHORT_CODE_RE = re.compile(r"\b\d{4,6}\b")
UPPERCASE_RE = re.compile(r"[A-Z]")

# -----------------------------
# Weights and reasons
# -----------------------------
W_LOTTERY = 40
W_FINANCIAL_DETAILS = 35
W_ADVANCE_FEE = 20
W_LARGE_SUM = 20
W_TRANSFER_PROMISE = 20
W_SHORT_CODE = 8
W_KEYWORD = 6
W_EXCLAMATIONS = 5
W_CAPS = 5

EXCLAMATION_MIN = 3
CAPS_RATIO_MIN = 0.25

R_LOTTERY = "Lottery / prize language detected"
R_FINANCIAL_DETAILS = "Asks for UPI / bank / account / transaction details"
R_ADVANCE_FEE = "Advance-fee / processing fee pattern detected"
R_LARGE_SUM = "Mentions a large sum of money"
R_TRANSFER_PROMISE = "Promises/requests money transfer"
R_SHORT_CODE = "Contains short numeric code (possible OTP/PIN)"
R_KEYWORD = "Contains suspicious keyword: {keyword}"
R_EXCLAMATIONS = "Multiple exclamation marks (urgency)"
R_CAPS = "High capitalization ratio"


@dataclass(frozen=True)
class TextSignals:
    score: int
    reasons: Tuple[str, ...]


def _any_phrase(lower: str, phrases) -> bool:
    return any(p in lower for p in phrases)


def caps_ratio(text: str) -> float:
    if not text:
        return 0.0
    return len(UPPERCASE_RE.findall(text)) / len(text)


def score_text(text: str, field: str = "text") -> TextSignals:
    """
    Score one text input.

    Raises InputValidationError when the text is missing or only whitespace;
    `field` names the input in the error message.
    """
    t = (text or "").strip()
    if not t:
        raise InputValidationError(field)
    lower = t.lower()

    score = 0
    reasons = ReasonSet()

    if _any_phrase(lower, LOTTERY_PHRASES):
        score += W_LOTTERY
        reasons.add(R_LOTTERY)

    if _any_phrase(lower, FINANCIAL_DETAIL_PHRASES):
        score += W_FINANCIAL_DETAILS
        reasons.add(R_FINANCIAL_DETAILS)

    if _any_phrase(lower, ADVANCE_FEE_PHRASES):
        score += W_ADVANCE_FEE
        reasons.add(R_ADVANCE_FEE)

    if LARGE_SUM_RE.search(lower):
        score += W_LARGE_SUM
        reasons.add(R_LARGE_SUM)

    if TRANSFER_PROMISE_RE.search(lower):
        score += W_TRANSFER_PROMISE
        reasons.add(R_TRANSFER_PROMISE)

    # candidate OTP/PIN
    if SHORT_CODE_RE.search(lower):
        score += W_SHORT_CODE
        reasons.add(R_SHORT_CODE)

    for keyword in SUSPICIOUS_KEYWORDS:
        if keyword in lower:
            score += W_KEYWORD
            reasons.add(R_KEYWORD.format(keyword=keyword))

    if t.count("!") >= EXCLAMATION_MIN:
        score += W_EXCLAMATIONS
        reasons.add(R_EXCLAMATIONS)

    if caps_ratio(t) > CAPS_RATIO_MIN:
        score += W_CAPS
        reasons.add(R_CAPS)

    return TextSignals(score=clamp_score(score), reasons=reasons.as_tuple())
