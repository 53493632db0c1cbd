"""Warm-up quiz on logarithms with an explicit score object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

PASS_MARK = 2


@dataclass(frozen=True)
class QuizQuestion:
  prompt: str
  choices: Dict[str, str]
  correct: str
  explanation: str


QUESTIONS: Dict[str, QuizQuestion] = {
  "q1": QuizQuestion(
    prompt="log₂ 8 = ?",
    choices={"a": "2", "b": "3", "c": "4"},
    correct="b",
    explanation="log₂ 8 = 3 (because 2³ = 8)",
  ),
  "q2": QuizQuestion(
    prompt="log₂ (1/4) = ?",
    choices={"a": "-2", "b": "2", "c": "1/2"},
    correct="a",
    explanation="log₂ (1/4) = log₂ (2⁻²) = -2",
  ),
  "q3": QuizQuestion(
    prompt="2ˣ = 16, x = ?",
    choices={"a": "3", "b": "4", "c": "8"},
    correct="b",
    explanation="2ˣ = 16 = 2⁴, so x = 4",
  ),
}


@dataclass
class QuizState:
  """Latest answer per question; re-answering replaces the previous one."""

  answers: Dict[str, str] = field(default_factory=dict)

  def answer(self, question_id: str, choice: str) -> Tuple[bool, str]:
    if question_id not in QUESTIONS:
      raise KeyError(f"Unknown question {question_id!r}")
    question = QUESTIONS[question_id]
    self.answers[question_id] = choice
    return choice == question.correct, question.explanation

  @property
  def correct_count(self) -> int:
    return sum(1 for qid, choice in self.answers.items() if QUESTIONS[qid].correct == choice)

  @property
  def passed(self) -> bool:
    return self.correct_count >= PASS_MARK

  def reset(self) -> None:
    self.answers.clear()

  def summary(self) -> str:
    text = f"correct: {self.correct_count}/{len(QUESTIONS)}"
    if self.passed:
      text += " (pass)"
    return text


__all__ = ["PASS_MARK", "QUESTIONS", "QuizQuestion", "QuizState"]
