# quiz_api/models.py
from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _QuestionBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    question: str


class RadioQuestion(_QuestionBase):
    """Single choice; the answer is the text of the chosen option."""

    type: Literal['radio'] = 'radio'
    choices: List[str]
    correct_index: int = Field(alias='correctIndex')


class CheckboxQuestion(_QuestionBase):
    """Multiple choice; the answer is the list of chosen option indexes."""

    type: Literal['checkbox'] = 'checkbox'
    choices: List[str]
    correct_indexes: List[int] = Field(alias='correctIndexes')


class TextQuestion(_QuestionBase):
    """Free text, compared after normalization."""

    type: Literal['text'] = 'text'
    correct_text: str = Field(alias='correctText')


Question = Annotated[
    Union[RadioQuestion, CheckboxQuestion, TextQuestion],
    Field(discriminator='type'),
]


class Answer(BaseModel):
    # Both fields stay untyped: ids may arrive as strings and the value shape
    # depends on the question it answers.
    id: Any
    value: Any


class GradeResult(BaseModel):
    id: int
    correct: bool


class GradeResponse(BaseModel):
    score: int
    total: int
    results: List[GradeResult]


QuestionList = TypeAdapter(List[Question])
AnswerList = TypeAdapter(List[Answer])
