"""Analysis results — tagged decode of the model's JSON reply."""
import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any, Optional, Union

from catalyzer.constants import CONFIDENCE_MAX, CONFIDENCE_MIN, OBSERVATION_COUNT

logger = logging.getLogger(__name__)

_FENCE_JSON = re.compile(r"```json\n?")
_FENCE = re.compile(r"```\n?")

_CAT_FIELDS = frozenset(
    {"is_cat", "is_pazuzu", "confidence", "threat_level", "observations", "summary"}
)


@total_ordering
class ThreatLevel(Enum):
    """Perceived chaos intensity, declared from calmest to most dangerous."""

    MINIMAL = "MINIMAL"
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    MAXIMUM = "MAXIMUM"
    RUN = "RUN"

    @property
    def rank(self) -> int:
        return list(ThreatLevel).index(self)

    def __lt__(self, other: "ThreatLevel") -> bool:
        match other:
            case ThreatLevel():
                return self.rank < other.rank
            case _:
                return NotImplemented


@dataclass(frozen=True)
class NotACat:
    def to_dict(self) -> dict[str, Any]:
        return {"is_cat": False}


@dataclass(frozen=True)
class CatAnalysis:
    is_pazuzu: bool
    confidence: Union[int, float]
    threat_level: ThreatLevel
    observations: tuple[str, ...]
    summary: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_cat": True,
            "is_pazuzu": self.is_pazuzu,
            "confidence": self.confidence,
            "threat_level": self.threat_level.value,
            "observations": list(self.observations),
            "summary": self.summary,
        }


@dataclass(frozen=True)
class ParseFailure:
    raw: str
    reason: str


@dataclass(frozen=True)
class AnalysisError:
    """JSON error body returned by the HTTP layer."""

    error: str
    message: Optional[str] = None
    raw: Optional[str] = None

    def to_dict(self) -> dict[str, str]:
        fields = {"error": self.error, "message": self.message, "raw": self.raw}
        return {k: v for k, v in fields.items() if v is not None}


AnalysisResult = Union[CatAnalysis, NotACat]
AnalysisOutcome = Union[CatAnalysis, NotACat, ParseFailure]


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markdown fences the model may wrap around its JSON."""
    return _FENCE.sub("", _FENCE_JSON.sub("", text)).strip()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _decode_cat(payload: dict[str, Any]) -> CatAnalysis:
    """Decode the full cat shape. Raises ValueError on any contract violation."""
    missing = _CAT_FIELDS - payload.keys()
    if missing:
        raise ValueError(f"missing fields: {', '.join(sorted(missing))}")

    match payload:
        case {"is_cat": True, "is_pazuzu": bool() as pazuzu}:
            pass
        case _:
            raise ValueError("is_cat and is_pazuzu must be booleans")

    confidence = payload["confidence"]
    if not _is_number(confidence) or not CONFIDENCE_MIN <= confidence <= CONFIDENCE_MAX:
        raise ValueError(f"confidence out of range: {confidence!r}")

    try:
        threat_level = ThreatLevel(payload["threat_level"])
    except ValueError:
        raise ValueError(f"unknown threat_level: {payload['threat_level']!r}") from None

    observations = payload["observations"]
    match observations:
        case list() if len(observations) == OBSERVATION_COUNT and all(
            isinstance(o, str) for o in observations
        ):
            pass
        case _:
            raise ValueError(f"observations must be {OBSERVATION_COUNT} strings")

    summary = payload["summary"]
    if not isinstance(summary, str):
        raise ValueError("summary must be a string")

    return CatAnalysis(
        is_pazuzu=pazuzu,
        confidence=confidence,
        threat_level=threat_level,
        observations=tuple(observations),
        summary=summary,
    )


def _decode_not_cat(payload: dict[str, Any]) -> NotACat:
    match payload:
        case {"is_cat": False}:
            return NotACat()
        case _:
            raise ValueError("not a recognised analysis shape")


def parse_analysis(text: str) -> AnalysisOutcome:
    """Decode the model reply as the cat shape, then the non-cat shape.

    Never raises: anything that fits neither shape comes back as a
    ParseFailure carrying the untouched reply text.
    """
    try:
        payload = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as exc:
        return ParseFailure(raw=text, reason=str(exc))

    if not isinstance(payload, dict):
        return ParseFailure(raw=text, reason="reply is not a JSON object")

    try:
        return _decode_cat(payload)
    except ValueError as cat_exc:
        cat_reason = str(cat_exc)

    try:
        return _decode_not_cat(payload)
    except ValueError:
        logger.debug("Cat shape rejected: %s", cat_reason)
        return ParseFailure(raw=text, reason=cat_reason)
