"""
Result assembly
---------------
Glue between the analyzers and the outside world: run one analyzer, map its
score through the shared risk labels, and package the channel-specific extras
into one immutable AnalysisResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from scamscope.core.behavior import Alert, score_behavior
from scamscope.core.errors import InputValidationError
from scamscope.core.risk import RiskAssessment, assess
from scamscope.core.tables import parse_transaction_table
from scamscope.core.text_signals import score_text
from scamscope.core.url_signals import score_url
from scamscope.settings import settings

# channel -> (response type, request field name)
TEXT_CHANNELS = {
    "text": ("text", "text"),
    "voice": ("voice", "transcript"),
    "ocr": ("ocr", "ocrText"),
}


@dataclass(frozen=True)
class AnalysisResult:
    kind: str
    score: int
    risk: RiskAssessment
    reasons: Optional[Tuple[str, ...]] = None
    alerts: Optional[Tuple[Alert, ...]] = None
    extras: Tuple[Tuple[str, Any], ...] = field(default_factory=tuple)

    def extra(self, key: str, default: Any = None) -> Any:
        return dict(self.extras).get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape (camelCase keys)."""
        out: Dict[str, Any] = {
            "type": self.kind,
            "score": self.score,
            "smallScore": self.risk.small_score,
            "verdict": self.risk.verdict,
            "status": self.risk.status,
            "riskLevel": self.risk.level,
            "riskColor": self.risk.color,
        }
        if self.reasons is not None:
            out["reasons"] = list(self.reasons)
        if self.alerts is not None:
            out["alerts"] = [a.to_dict() for a in self.alerts]
        out.update(self.extras)
        return out


def analyze_text(text: str, channel: str = "text") -> AnalysisResult:
    """
    Score free text from the text, voice-transcript or OCR channel.
    Raises InputValidationError when the text is empty after trimming.
    """
    if channel not in TEXT_CHANNELS:
        raise ValueError(f"unknown text channel: {channel}")
    kind, field_name = TEXT_CHANNELS[channel]
    raw = "" if text is None else str(text)

    signals = score_text(raw, field=field_name)

    extras = [("preview", raw[: settings.PREVIEW_MAX_CHARS])]
    if channel == "voice":
        extras.append(("transcript", raw))
    return AnalysisResult(
        kind=kind,
        score=signals.score,
        risk=assess(signals.score),
        reasons=signals.reasons,
        extras=tuple(extras),
    )


def analyze_url(url: str) -> AnalysisResult:
    raw = "" if url is None else str(url)
    if not raw.strip():
        raise InputValidationError("url")
    signals = score_url(raw)
    return AnalysisResult(
        kind="url",
        score=signals.score,
        risk=assess(signals.score),
        reasons=signals.reasons,
        extras=(("url", signals.url),),
    )


def analyze_behavior(rows: Iterable[Mapping[str, Any]]) -> AnalysisResult:
    signals = score_behavior(rows)
    return AnalysisResult(
        kind="behavior",
        score=signals.score,
        risk=assess(signals.score),
        alerts=signals.alerts,
        extras=(("rows", signals.rows),),
    )


def analyze_behavior_table(text: str) -> AnalysisResult:
    """Parse CSV text and score it. Raises TableParseError on a malformed table."""
    return analyze_behavior(parse_transaction_table(text))
