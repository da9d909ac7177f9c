# questionnaire_cli.py
"""
Take the wellness assessment in a terminal. Nothing is saved.
Usage: python questionnaire_cli.py
"""

import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.services.catalog import DEFAULT_CATALOG, QuestionDefinition
from app.services.errors import ValidationError
from app.services.questionnaire_session import QuestionnaireSession
from app.services.recommendation_engine import derive_recommendations, risk_tier, wellness_score
from app.services.safety import CrisisDisclosure
from app.services.scoring import compute_risk_score, in_declared_range


def show_crisis(disclosure: CrisisDisclosure) -> None:
    print("\n" + "!" * 60)
    print(disclosure.message)
    for line in disclosure.hotlines:
        print(f"  - {line['name']}: {line['contact']}")
    print("!" * 60 + "\n")


def choice_at(question: QuestionDefinition, raw: str) -> str:
    n = int(raw)
    if not 1 <= n <= len(question.choices):
        raise ValueError(f"pick a number from 1 to {len(question.choices)}")
    return question.choices[n - 1].value


def read_answer(question: QuestionDefinition, raw: str):
    raw = raw.strip()
    if not raw:
        return None
    if question.kind == "single-choice":
        return choice_at(question, raw)
    if question.kind == "multi-choice":
        return [choice_at(question, p) for p in raw.replace(",", " ").split()]
    if question.kind == "numeric":
        value = float(raw)
        if not in_declared_range(question, value):
            raise ValueError(f"enter a number from {question.min_value:g} to {question.max_value:g}")
        return value
    return raw


def run(session: QuestionnaireSession) -> dict:
    while True:
        q = session.current
        print(f"\n[{session.index + 1}/{len(session.catalog)}] {q.prompt}")
        for i, c in enumerate(q.choices, start=1):
            print(f"  {i}. {c.label}")
        if q.kind == "numeric":
            print(f"  ({q.min_value:g}-{q.max_value:g})")
        hint = "b = back" + ("" if q.required else ", enter = skip")
        raw = input(f"> ({hint}) ")

        if raw.strip().lower() == "b":
            session.retreat()
            continue
        try:
            session.answer(read_answer(q, raw))
            submission = session.advance()
        except (ValueError, ValidationError) as e:
            print(f"  ! {e}")
            continue
        if submission is not None:
            return submission


def main() -> None:
    parser = argparse.ArgumentParser(description="Wellness self-assessment")
    parser.add_argument("--category", default="general", help="label stored with the result")
    args = parser.parse_args()

    session = QuestionnaireSession(DEFAULT_CATALOG, category=args.category, on_crisis=show_crisis)
    submission = run(session)

    score = compute_risk_score(submission["responses"], DEFAULT_CATALOG)
    print(f"\nRisk score: {score} ({risk_tier(score)} risk)")
    print(f"Wellness score: {wellness_score(score)}/10")
    for rec in derive_recommendations(score):
        print(f"  * {rec}")


if __name__ == "__main__":
    main()
