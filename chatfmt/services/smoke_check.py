from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

SAMPLE_MESSAGE = """I need to look up traffic accident data for Manhattan in February 2024. Let me call the traffic data query tool.

# February 2024 Traffic Accident Analysis

According to the traffic data query, New York City recorded 6,841 traffic accidents in February 2024. Details below:

## Overview
- Total accidents: 6,841
- Coverage: Manhattan, Brooklyn, Queens and other boroughs
- Time range: records starting February 1

## Accident Types
1. Vehicle types:
   - Sedans were the most commonly involved vehicle
   - Other common types: taxis, pickups, SUVs

## Contributing Factors
- Main factors: driver inattention, traffic control disregarded, speeding
- Other factors: mechanical problems, unspecified

## Recommendations
1. Tighten enforcement against distracted driving
2. Add warning signage on high-incident road segments
3. Expand safety education for cyclists"""

_RAW_HEADING_MARKERS = ("# ", "## ", "### ")


@dataclass(frozen=True)
class CheckResult:
    name: str
    passed: bool
    message: str


@dataclass
class SmokeReport:
    results: List[CheckResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.passed for r in self.results)


def run_smoke_check(html: str) -> SmokeReport:
    """Runs substring checks on a rendered fragment.

    - No raw heading markers ("# ", "## ", "### ") remain.
    - Both <h1> and <h2> tags are present.
    """
    report = SmokeReport()

    leftover = [m for m in _RAW_HEADING_MARKERS if m in html]
    if leftover:
        report.results.append(
            CheckResult(
                name="headings_converted",
                passed=False,
                message=f"raw heading markers remain: {', '.join(repr(m) for m in leftover)}",
            )
        )
    else:
        report.results.append(
            CheckResult(
                name="headings_converted",
                passed=True,
                message="headings converted to HTML tags",
            )
        )

    has_tags = "<h1>" in html and "<h2>" in html
    report.results.append(
        CheckResult(
            name="heading_tags_present",
            passed=has_tags,
            message="found <h1> and <h2> tags"
            if has_tags
            else "missing <h1> or <h2> tags",
        )
    )
    return report
