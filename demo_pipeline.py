#!/usr/bin/env python3
"""
Complete Pipeline Demo: random curves -> evaluation -> filter -> sort -> parallel sum

Shows the full workflow:
1. Generate a seeded random collection
2. Evaluate every curve at t = PI / 4
3. Keep the circles and sort them by radius
4. Sum their radii with a thread pool and compare to the sequential sum
"""

import random

from curvekit.formatting import format_evaluation, format_number, format_total
from curvekit.generation import CurveGenerator, generate_collection
from curvekit.pipeline import run_pipeline
from curvekit.reduction import sequential_radius_sum


def main():
    print("=" * 80)
    print("CURVE PIPELINE DEMO")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Generate
    # =========================================================================
    print("\n1. GENERATING CURVES...")
    collection = generate_collection(10, CurveGenerator(random.Random(2024)))
    for kind, n in collection.count_by_kind().items():
        print(f"   {kind.value}: {n}")

    report = run_pipeline(collection)

    # =========================================================================
    # STEP 2: Evaluate
    # =========================================================================
    print("\n2. EVALUATING AT t = PI / 4...")
    print("-" * 80)
    for evaluation in report.evaluations:
        print(format_evaluation(evaluation))
        print()

    # =========================================================================
    # STEP 3: Filter and sort
    # =========================================================================
    print("3. CIRCLES BY RADIUS:")
    print("-" * 80)
    for curve in report.selected:
        print(f"   {curve.describe()}")

    # =========================================================================
    # STEP 4: Reduce
    # =========================================================================
    print("\n4. PARALLEL SUM:")
    print("-" * 80)
    print(f"   {format_total(report)}")
    print(f"   Sequential check: {format_number(sequential_radius_sum(report.selected))}")
    print("=" * 80)


if __name__ == "__main__":
    main()
