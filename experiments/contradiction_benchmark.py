#!/usr/bin/env python3
# Author: Bradley R. Kinnard
"""
Contradiction Detection Benchmark

Runs ContradictionAnalyzerAgent over a curated corpus of valuation-report
snippets, each labelled with the contradiction category it should trigger
(or "none"), and reports per-category detection and false-positive rates.

Outputs JSON artifact to results/contradiction_benchmark.json
"""

import asyncio
import json
import sys
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path

# ensure project root is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from contradiction_engine.agents.contradiction_analyzer import ContradictionAnalyzerAgent


@dataclass
class BenchmarkCase:
    id: str
    category: str  # contradiction type expected, or "none"
    text: str


@dataclass
class CaseResult:
    case_id: str
    category: str
    detected_types: list[str]
    finding_count: int
    correct: bool
    latency_ms: float


@dataclass
class CategoryMetrics:
    category: str
    total_cases: int
    correct: int
    accuracy: float


@dataclass
class BenchmarkReport:
    timestamp: str
    corpus_version: str
    total_cases: int
    accuracy: float
    false_positive_cases: int
    category_metrics: list[CategoryMetrics]
    case_results: list[CaseResult]


CORPUS = [
    BenchmarkCase("neg-01", "logical", "The zoning certificate is valid. On review the zoning certificate is invalid."),
    BenchmarkCase("neg-02", "logical", "Settlement will happen in March. Settlement will not happen this year."),
    BenchmarkCase("quant-01", "quantitative", "Rental yields increase across the precinct. Rental yields decrease near the highway."),
    BenchmarkCase("quant-02", "quantitative", "Vacancy rates rise each quarter and then decline sharply in winter."),
    BenchmarkCase("temp-01", "temporal", "The extension was built before the subdivision and registered after the sale."),
    BenchmarkCase("fact-01", "factual", "The title search is correct. The title search is wrong about the easement."),
    BenchmarkCase("qual-01", "semantic", "The roof is in good condition. The roof is in poor condition."),
    BenchmarkCase("sem-01", "semantic", "The lot is large. The lot is small for the zone."),
    BenchmarkCase("sem-02", "semantic", "The neighbourhood is safe. The neighbourhood is dangerous after dark."),
    BenchmarkCase("abs-01", "logical", "All comparable sales were in the same street and some were interstate."),
    BenchmarkCase("none-01", "none", "The dwelling is a brick veneer residence on a corner allotment."),
    BenchmarkCase("none-02", "none", "Sales evidence was sourced from recent local transactions."),
    BenchmarkCase("none-03", "none", "The area is safe. However, some streets are dangerous at night."),
]


async def _evaluate(agent: ContradictionAnalyzerAgent, case: BenchmarkCase) -> CaseResult:
    start = time.perf_counter()
    matches = await agent.analyze_text(case.text)
    latency = (time.perf_counter() - start) * 1000

    detected = sorted({m.type.value for m in matches})
    if case.category == "none":
        correct = not matches
    else:
        correct = case.category in detected

    return CaseResult(
        case_id=case.id,
        category=case.category,
        detected_types=detected,
        finding_count=len(matches),
        correct=correct,
        latency_ms=round(latency, 3),
    )


def run_benchmark() -> BenchmarkReport:
    """Run full benchmark."""
    print(f"Running {len(CORPUS)} cases...")
    agent = ContradictionAnalyzerAgent()

    async def _run_all():
        return [await _evaluate(agent, c) for c in CORPUS]

    case_results = asyncio.run(_run_all())

    categories: dict[str, dict[str, int]] = {}
    for r in case_results:
        counts = categories.setdefault(r.category, {"total": 0, "correct": 0})
        counts["total"] += 1
        if r.correct:
            counts["correct"] += 1

    category_metrics = [
        CategoryMetrics(
            category=cat,
            total_cases=counts["total"],
            correct=counts["correct"],
            accuracy=round(counts["correct"] / counts["total"], 4) if counts["total"] else 0.0,
        )
        for cat, counts in sorted(categories.items())
    ]

    total = len(case_results)
    correct = sum(1 for r in case_results if r.correct)
    false_positives = sum(1 for r in case_results if r.category == "none" and not r.correct)

    return BenchmarkReport(
        timestamp=datetime.now(timezone.utc).isoformat(),
        corpus_version="1.0.0",
        total_cases=total,
        accuracy=round(correct / total, 4) if total else 0.0,
        false_positive_cases=false_positives,
        category_metrics=category_metrics,
        case_results=case_results,
    )


def print_summary(report: BenchmarkReport):
    """Print human-readable summary."""
    print("\n" + "=" * 60)
    print("CONTRADICTION DETECTION BENCHMARK RESULTS")
    print("=" * 60)
    print(f"Timestamp: {report.timestamp}")
    print(f"Corpus version: {report.corpus_version}")
    print(f"Total cases: {report.total_cases}")
    print(f"Overall accuracy: {report.accuracy*100:.1f}%")
    print(f"False-positive cases: {report.false_positive_cases}")
    print()
    print("ACCURACY BY CATEGORY")
    print("-" * 60)
    print(f"{'Category':<20} {'Correct':>10} {'Total':>10} {'Accuracy':>10}")
    print("-" * 60)
    for m in report.category_metrics:
        print(f"{m.category:<20} {m.correct:>10} {m.total_cases:>10} {m.accuracy*100:>9.1f}%")
    print("-" * 60)
    print()


def main():
    report = run_benchmark()

    output_path = PROJECT_ROOT / "results" / "contradiction_benchmark.json"
    output_path.parent.mkdir(exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(asdict(report), f, indent=2)

    print(f"Results saved to {output_path}")
    print_summary(report)

    return 0


if __name__ == "__main__":
    sys.exit(main())
