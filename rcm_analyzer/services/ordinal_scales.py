"""
Ordinal Scales

Fixed rank tables used by the RPN engine. Frequency and severity grow with
the label; detectability is inverted, so a failure that is easy to detect
gets the lowest rank.
"""

from typing import Dict

FREQUENCY_RANKS: Dict[str, int] = {
    'Very Low': 1,
    'Low': 2,
    'Medium': 3,
    'High': 4,
    'Very High': 5,
}

SEVERITY_RANKS: Dict[str, int] = {
    'Minor': 1,
    'Moderate': 2,
    'Major': 3,
    'Critical': 4,
}

DETECTABILITY_RANKS: Dict[str, int] = {
    'Very High': 1,
    'High': 2,
    'Medium': 3,
    'Low': 4,
    'Very Low': 5,
}

SCALES: Dict[str, Dict[str, int]] = {
    'frequency': FREQUENCY_RANKS,
    'severity': SEVERITY_RANKS,
    'detectability': DETECTABILITY_RANKS,
}


class InvalidEnumValue(ValueError):
    """Raised when a label is not part of an ordinal scale."""

    def __init__(self, scale: str, value):
        self.scale = scale
        self.value = value
        allowed = ', '.join(SCALES.get(scale, {}))
        super().__init__(f"Invalid {scale} value {value!r}; expected one of: {allowed}")


def rank(scale: str, label: str) -> int:
    """Look up the integer rank of a label on the named scale."""
    table = SCALES[scale]
    # bool/int labels never match; only the exact string labels are ranked
    if not isinstance(label, str) or label not in table:
        raise InvalidEnumValue(scale, label)
    return table[label]


def frequency_rank(label: str) -> int:
    return rank('frequency', label)


def severity_rank(label: str) -> int:
    return rank('severity', label)


def detectability_rank(label: str) -> int:
    return rank('detectability', label)
