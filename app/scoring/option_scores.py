"""Question score resolution.

Turns a candidate answer into the score stored on a Response:

  text_input          → None (never scored)
  any other type      → score of the option whose value matches exactly
  no matching option  → InvalidOptionValueError (never a silent zero)
"""
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from app.models.enums import QuestionType
from app.scoring.errors import InvalidOptionValueError


@dataclass(frozen=True)
class OptionScoreTable:
    """Option value → score mapping for a single question."""

    question_id: Optional[int] = None
    scores: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def from_options(cls, options: Iterable, question_id: Optional[int] = None) -> "OptionScoreTable":
        """Build from objects exposing ``value`` and ``score`` (ORM rows or pydantic models)."""
        return cls(
            question_id=question_id,
            scores={opt.value: int(opt.score) for opt in options},
        )

    def lookup(self, value: str) -> Optional[int]:
        # Exact, case-sensitive match
        return self.scores.get(value)

    def __contains__(self, value: str) -> bool:
        return value in self.scores

    def __len__(self) -> int:
        return len(self.scores)


def resolve_question_score(
    question_type: QuestionType | str,
    option_table: OptionScoreTable,
    value: str,
) -> Optional[int]:
    """Resolve the score to store for ``value`` on a question.

    Args:
        question_type: The question's type.
        option_table: The question's option scores.
        value: The submitted answer token.

    Returns:
        The option score, or None for text_input questions.

    Raises:
        InvalidOptionValueError: value matches no option of a scored question.
    """
    question_type = QuestionType(question_type)
    if question_type is QuestionType.TEXT_INPUT:
        return None

    score = option_table.lookup(value)
    if score is None:
        raise InvalidOptionValueError(
            value=value,
            question_type=question_type.value,
            question_id=option_table.question_id,
        )
    return score


def resolve_for_question(question, value: str) -> Optional[int]:
    """Convenience wrapper taking a Question ORM row (with loaded options)."""
    table = OptionScoreTable.from_options(question.options, question_id=question.id)
    return resolve_question_score(question.type, table, value)
