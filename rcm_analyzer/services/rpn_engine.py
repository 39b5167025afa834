"""
RPN Risk Engine

Computes the Risk Priority Number of a failure mode and buckets it:
RPN = Frequency rank x Severity rank x Detectability rank

With the four-level severity scale the RPN lies between 1 and 100.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List

from .ordinal_scales import detectability_rank, frequency_rank, severity_rank


class RiskLevel(Enum):
    """Risk bands, highest first"""
    CRITICAL = 'Critical'
    HIGH = 'High'
    MEDIUM = 'Medium'
    LOW = 'Low'


# Inclusive lower bounds, checked in this order
RISK_THRESHOLDS = (
    (60, RiskLevel.CRITICAL),
    (40, RiskLevel.HIGH),
    (20, RiskLevel.MEDIUM),
)


@dataclass
class RiskAssessment:
    """RPN and risk band for a single failure mode"""
    failure_mode: object
    rpn: int
    risk_level: RiskLevel

    def to_dict(self) -> Dict:
        data = self.failure_mode.to_dict() if hasattr(self.failure_mode, 'to_dict') else dict(self.failure_mode)
        data['rpn'] = self.rpn
        data['risk'] = self.risk_level.value
        return data


def compute_rpn(frequency: str, severity: str, detectability: str) -> int:
    """
    Compute the Risk Priority Number from the three ordinal labels.

    Raises InvalidEnumValue if any label is not on its scale.
    """
    return frequency_rank(frequency) * severity_rank(severity) * detectability_rank(detectability)


def classify_risk(rpn: int) -> RiskLevel:
    """Map an RPN onto its risk band."""
    for threshold, level in RISK_THRESHOLDS:
        if rpn >= threshold:
            return level
    return RiskLevel.LOW


def assess_failure_mode(mode) -> RiskAssessment:
    rpn = compute_rpn(mode.frequency, mode.severity, mode.detectability)
    return RiskAssessment(failure_mode=mode, rpn=rpn, risk_level=classify_risk(rpn))


def assess_failure_modes(modes: Iterable) -> List[RiskAssessment]:
    """
    Score every failure mode and rank them, highest RPN first.

    Modes with equal RPN keep their input order.
    """
    assessments = [assess_failure_mode(mode) for mode in modes]
    assessments.sort(key=lambda a: a.rpn, reverse=True)
    return assessments


def summarize_risk(assessments: Iterable[RiskAssessment]) -> Dict[str, int]:
    """Count assessments per risk band; every band is present."""
    summary = {level.value: 0 for level in RiskLevel}
    for assessment in assessments:
        summary[assessment.risk_level.value] += 1
    return summary
