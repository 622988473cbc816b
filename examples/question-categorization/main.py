#!/usr/bin/env python3
"""Example: categorize sample community questions.

Runs every question in data.py through the classifier engine and prints
the assigned category, intent, tags and quality score, followed by
accuracy against the expected categories.

Usage:
    # From the repository root, with the package installed
    pip install -e .

    python examples/question-categorization/main.py
"""

import logging
import sys

from classifier import CategorizationOrchestrator, build_tables

from data import TEST_QUESTIONS


def main() -> None:
    logging.basicConfig(level=logging.WARNING)

    orchestrator = CategorizationOrchestrator(build_tables())
    results = []

    print("=" * 80)
    for i, question in enumerate(TEST_QUESTIONS, 1):
        print(f"\n[{i}/{len(TEST_QUESTIONS)}] Categorizing: {question['title'][:50]}...")
        print("-" * 80)

        result = orchestrator.process(question["title"], question["content"])
        quality = orchestrator.assess_quality(question["title"], question["content"])
        category = result.primary_category.category.value

        results.append({
            "question": question["title"],
            "assigned_category": category,
            "expected_category": question["expected_category"],
            "confidence": result.overall_confidence,
            "correct": category == question["expected_category"],
        })

        intent = result.intent_data
        print(f"  Category: {category} ({result.primary_category.reason})")
        print(f"  Confidence: {result.overall_confidence:.0%} via {result.method.value}")
        if intent is not None:
            print(f"  Question: {intent.is_question} ({intent.type.value}, {intent.confidence:.0%})")
        print(f"  Tags: {', '.join(t.tag for t in result.suggested_tags) or '-'}")
        print(f"  Quality: {quality.score} - {quality.label}")
        print(f"  Expected: {question['expected_category']}")
        print(f"  Match: {'✓' if results[-1]['correct'] else '✗'}")

    print("\n" + "=" * 80)
    correct_count = sum(1 for r in results if r["correct"])
    accuracy = (correct_count / len(results)) * 100

    print(f"Accuracy: {correct_count}/{len(results)} ({accuracy:.1f}%)")
    print(f"Average Confidence: {sum(r['confidence'] for r in results) / len(results):.0%}")

    errors = [r for r in results if not r["correct"]]
    if errors:
        print(f"\nMisclassifications ({len(errors)}):")
        for err in errors:
            print(f"  • {err['question'][:50]}")
            print(f"    Got: {err['assigned_category']}, Expected: {err['expected_category']}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(1)
