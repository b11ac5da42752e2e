"""Errors raised by the ESG scoring core.

All of them are recoverable by the caller (the API turns them into 400s);
the calculators raise and never swallow them.
"""


class ScoringError(Exception):
    """Base class for scoring failures the client can correct."""


class NoResponsesError(ScoringError):
    """No responses exist for the (company, questionnaire) pair."""

    def __init__(self, company_id=None, questionnaire_id=None):
        self.company_id = company_id
        self.questionnaire_id = questionnaire_id
        super().__init__("No responses found for the given company and questionnaire.")


class NoScoringConfigError(ScoringError):
    """The questionnaire has no scoring configuration at all."""

    def __init__(self, questionnaire_id=None):
        self.questionnaire_id = questionnaire_id
        super().__init__("No scoring configurations found for the given questionnaire.")


class InvalidOptionValueError(ScoringError):
    """A response value does not match any option configured on its question."""

    def __init__(self, value: str, question_type: str, question_id=None):
        self.value = value
        self.question_type = question_type
        self.question_id = question_id
        super().__init__(
            f"Invalid value '{value}' for question type '{question_type}': "
            f"value not among configured options for this question"
        )
