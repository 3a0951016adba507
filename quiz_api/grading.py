# quiz_api/grading.py
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .log import get_logger
from .models import (
    Answer,
    CheckboxQuestion,
    GradeResponse,
    GradeResult,
    Question,
    RadioQuestion,
    TextQuestion,
)

logger = get_logger(__name__)

_PUNCTUATION = re.compile(r'[^\w\s]|_')
_WHITESPACE = re.compile(r'\s+')
_NUMBER = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')


def normalize_id(raw: Any) -> Optional[float]:
    """
    Coerce a submitted answer id to a number.

    Plain decimal strings (optional sign and exponent) are parsed; anything
    else, booleans, 'nan', 'inf' and '1_0' included, returns None and will
    never match a question.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if not _NUMBER.fullmatch(text):
            return None
        return float(text)
    return None


def normalize_text(text: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    text = text.lower().strip()
    text = _PUNCTUATION.sub('', text)
    return _WHITESPACE.sub(' ', text).strip()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_radio(question: RadioQuestion, value: Any) -> bool:
    if not isinstance(value, str):
        return False
    if not 0 <= question.correct_index < len(question.choices):
        return False
    return value == question.choices[question.correct_index]


def _check_checkbox(question: CheckboxQuestion, value: Any) -> bool:
    if not isinstance(value, list) or not all(_is_number(v) for v in value):
        return False
    return set(value) == set(question.correct_indexes)


def _check_text(question: TextQuestion, value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return normalize_text(value) == normalize_text(question.correct_text)


_CHECKERS = {
    'radio': _check_radio,
    'checkbox': _check_checkbox,
    'text': _check_text,
}


def _as_answer(item: Union[Answer, Dict[str, Any]]) -> Answer:
    if isinstance(item, Answer):
        return item
    return Answer(id=item.get('id'), value=item.get('value'))


def find_answer(question_id: int, answers: Sequence[Answer]) -> Optional[Answer]:
    for answer in answers:
        if normalize_id(answer.id) == question_id:
            return answer
    return None


def is_correct(question: Question, answer: Optional[Answer]) -> bool:
    if answer is None:
        return False
    checker = _CHECKERS.get(question.type)
    if checker is None:
        return False
    return checker(question, answer.value)


def grade_answers(
    questions: Sequence[Question],
    answers: Iterable[Union[Answer, Dict[str, Any]]],
) -> GradeResponse:
    """
    Grade submitted answers against a question list.

    Every question yields exactly one result in input order. Unanswered
    questions and answers of the wrong shape are incorrect; answers whose id
    matches no question are ignored.

    Returns:
        GradeResponse with score, total and per-question results
    """
    submitted = [_as_answer(item) for item in answers]

    results: List[GradeResult] = []
    score = 0
    for question in questions:
        correct = is_correct(question, find_answer(question.id, submitted))
        if correct:
            score += 1
        results.append(GradeResult(id=question.id, correct=correct))

    logger.info('quiz.graded', score=score, total=len(questions), answers=len(submitted))
    return GradeResponse(score=score, total=len(questions), results=results)
