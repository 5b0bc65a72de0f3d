from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

RiskLevel = Literal["Critical Scam", "High Risk", "Moderate Risk", "Low Risk", "Clean / Safe"]
Verdict = Literal["POTENTIAL FRAUD", "UNSAFE", "SAFE"]
Channel = Literal["text", "voice", "ocr", "url", "behavior"]

class AnalysisResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Channel
    score: int = Field(ge=0, le=100)
    smallScore: int = Field(ge=0, le=10)
    verdict: Verdict
    status: Verdict
    riskLevel: RiskLevel
    riskColor: str
    reasons: Optional[List[str]] = None
    # alert dicts carry per-rule metric keys (avg/tx, receivers/max, max/avg)
    alerts: Optional[List[Dict[str, Any]]] = None
    # channel extras
    preview: Optional[str] = None
    transcript: Optional[str] = None
    url: Optional[str] = None
    rows: Optional[int] = None

class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None

class PingResponse(BaseModel):
    ok: bool = True
    now: str
