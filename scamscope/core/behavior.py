"""
Transaction Behavior Aggregation
--------------------------------
Scores a batch of transaction rows by grouping them per source account and
applying account-level rules.

Unlike text scoring, rule outcomes do NOT add up: each rule is a severity tier
for the same concern, so the batch score is the highest tier triggered by any
account (or by the table-wide volume rule).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from scamscope.core.risk import clamp_score, round_half_up

UNKNOWN_ACCOUNT = "unknown"

# header aliases, compared case-insensitively
FROM_COLUMNS = ("fromaccount", "from_account", "from", "sender")
TO_COLUMNS = ("toaccount", "to_account", "to", "receiver")
AMOUNT_COLUMNS = ("amount", "amt", "value")

PLAIN_NUMBER_RE = re.compile(r"^\d+(\.\d+)?$")
NON_NUMERIC_RE = re.compile(r"[^\d.\-]")

# -----------------------------
# Rule thresholds / tier scores
# -----------------------------
HIGH_AVG_MIN_TX = 5
HIGH_AVG_AMOUNT = 50000
HIGH_AVG_SCORE = 75

FAN_OUT_MIN_RECEIVERS = 4
FAN_OUT_MAX_AMOUNT = 100000
FAN_OUT_SCORE = 80

OUTLIER_FACTOR = 10
OUTLIER_MIN_AMOUNT = 50000
OUTLIER_SCORE = 70

MID_RANGE_LOW = 2000
MID_RANGE_HIGH = 50000
MID_RANGE_SCORE = 35

VOLUME_MIN_ROWS = 200
VOLUME_SCORE = 30

A_HIGH_AVG = "High average transfer amount across many transactions"
A_FAN_OUT = "Many unique receivers + very large transfer"
A_OUTLIER = "Large outlier transfer"


@dataclass(frozen=True)
class TransactionRecord:
    from_account: str
    to_account: str
    amount: float


@dataclass
class AccountProfile:
    amounts: List[float] = field(default_factory=list)
    receivers: Set[str] = field(default_factory=set)
    tx_count: int = 0

    def add(self, record: TransactionRecord) -> None:
        self.amounts.append(record.amount)
        self.receivers.add(record.to_account)
        self.tx_count += 1

    @property
    def avg(self) -> float:
        if not self.amounts:
            return 0.0
        n = len(self.amounts)
        # divide first so very large amounts cannot overflow the running sum
        return math.fsum(a / n for a in self.amounts)

    @property
    def max(self) -> float:
        return max(self.amounts, default=0.0)

    @property
    def unique_receivers(self) -> int:
        return len(self.receivers)


@dataclass(frozen=True)
class Alert:
    from_account: str
    reason: str
    metrics: Tuple[Tuple[str, Any], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"from": self.from_account, "reason": self.reason}
        out.update(self.metrics)
        return out


@dataclass(frozen=True)
class BehaviorSignals:
    score: int
    rows: int
    alerts: Tuple[Alert, ...]


def _as_number(v: float):
    # 60000.0 -> 60000 so alert metrics read like the input table
    return int(v) if float(v).is_integer() else v


def _lower_keys(row: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in row.items():
        if k is None:
            continue
        key = str(k).strip().lower()
        if key not in out:
            out[key] = v
    return out


def _first_filled(row: Dict[str, Any], columns: Iterable[str]) -> Optional[str]:
    for c in columns:
        v = row.get(c)
        if v is not None and str(v).strip():
            return str(v).strip()
    return None


def parse_amount(raw: Any) -> float:
    """
    Best-effort numeric parse: currency symbols and thousands separators are
    stripped; anything unparsable or negative becomes 0.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        cleaned = NON_NUMERIC_RE.sub("", str(raw))
        if not cleaned:
            return 0.0
        try:
            value = float(cleaned)
        except ValueError:
            return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def coerce_record(row: Mapping[str, Any]) -> TransactionRecord:
    r = _lower_keys(row)
    from_account = _first_filled(r, FROM_COLUMNS) or UNKNOWN_ACCOUNT
    to_account = _first_filled(r, TO_COLUMNS) or UNKNOWN_ACCOUNT

    amount_raw: Any = None
    present = [c for c in AMOUNT_COLUMNS if c in r]
    if present:
        amount_raw = r[present[0]]
    else:
        for v in row.values():
            if v is not None and PLAIN_NUMBER_RE.match(str(v)):
                amount_raw = v
                break
    return TransactionRecord(from_account=from_account, to_account=to_account, amount=parse_amount(amount_raw))


def build_profiles(records: Iterable[TransactionRecord]) -> Dict[str, AccountProfile]:
    profiles: Dict[str, AccountProfile] = {}
    for rec in records:
        profiles.setdefault(rec.from_account, AccountProfile()).add(rec)
    return profiles


def evaluate_account(from_account: str, profile: AccountProfile) -> Tuple[int, List[Alert]]:
    """Return (highest tier score, alerts) for one account."""
    avg = profile.avg
    mx = profile.max
    score = 0
    alerts: List[Alert] = []

    if profile.tx_count >= HIGH_AVG_MIN_TX and avg > HIGH_AVG_AMOUNT:
        alerts.append(Alert(from_account, A_HIGH_AVG, (("avg", round_half_up(avg)), ("tx", profile.tx_count))))
        score = max(score, HIGH_AVG_SCORE)

    if profile.unique_receivers >= FAN_OUT_MIN_RECEIVERS and mx > FAN_OUT_MAX_AMOUNT:
        alerts.append(Alert(from_account, A_FAN_OUT, (("receivers", profile.unique_receivers), ("max", _as_number(mx)))))
        score = max(score, FAN_OUT_SCORE)

    if mx > avg * OUTLIER_FACTOR and mx > OUTLIER_MIN_AMOUNT:
        alerts.append(Alert(from_account, A_OUTLIER, (("max", _as_number(mx)), ("avg", round_half_up(avg)))))
        score = max(score, OUTLIER_SCORE)

    if MID_RANGE_LOW < mx <= MID_RANGE_HIGH:
        score = max(score, MID_RANGE_SCORE)

    return score, alerts


def score_behavior(rows: Iterable[Mapping[str, Any]]) -> BehaviorSignals:
    records = [coerce_record(r) for r in rows]
    profiles = build_profiles(records)

    score = 0
    alerts: List[Alert] = []
    for from_account, profile in profiles.items():
        s, found = evaluate_account(from_account, profile)
        score = max(score, s)
        alerts.extend(found)

    if len(records) > VOLUME_MIN_ROWS:
        score = max(score, VOLUME_SCORE)

    return BehaviorSignals(score=clamp_score(score), rows=len(records), alerts=tuple(alerts))
