# scoring.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

from app.rules.ruleset import DEFAULT_RULES, Rule
from app.schemas import Receipt

@dataclass(frozen=True)
class ScoreResult:
    points: int
    reasons: List[str] = field(default_factory=list)

def score_receipt(receipt: Receipt, rules: Sequence[Rule] = DEFAULT_RULES) -> ScoreResult:
    """
    Apply every rule independently and sum the awards.
    - reasons lists the rules that awarded a non-zero amount, in rule order
    """
    total = 0
    reasons: List[str] = []
    for rule in rules:
        inc, why = rule(receipt)
        if inc:
            total += inc
            if why:
                reasons.append(why)
    return ScoreResult(points=total, reasons=reasons)

def calculate_points(receipt: Receipt) -> int:
    return score_receipt(receipt).points
