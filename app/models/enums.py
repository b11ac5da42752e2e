"""Enumeration types for the ESG scoring platform."""
from enum import Enum


class Section(str, Enum):
    """The three ESG sections a question can belong to."""
    ENVIRONMENTAL = "Environmental"
    SOCIAL = "Social"
    GOVERNANCE = "Governance"


class QuestionType(str, Enum):
    """Answer formats supported by questions."""
    MULTIPLE_CHOICE = "multiple_choice"
    YES_NO = "yes_no"
    SCALE = "scale"
    TEXT_INPUT = "text_input"  # Free text, never scored


class AggregationMethod(str, Enum):
    """How response scores are combined within a section."""
    SUM = "sum"
    AVERAGE = "average"
    WEIGHTED_AVERAGE = "weighted_average"  # mean × section weight


class UserRole(str, Enum):
    """Roles for platform users."""
    ADMIN = "admin"
    USER = "user"


# Column order used by dashboards and exports
SECTION_ORDER: list[Section] = [
    Section.ENVIRONMENTAL,
    Section.SOCIAL,
    Section.GOVERNANCE,
]


# Question types whose responses are resolved against options
SCORED_QUESTION_TYPES: frozenset[QuestionType] = frozenset({
    QuestionType.MULTIPLE_CHOICE,
    QuestionType.YES_NO,
    QuestionType.SCALE,
})
