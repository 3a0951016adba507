# quiz_api/questions.py
import random
from typing import List, Optional, Sequence

from .models import CheckboxQuestion, Question, RadioQuestion, TextQuestion

QUIZ_QUESTIONS: List[Question] = [
    RadioQuestion(
        id=1,
        question='Which hook is used to manage state in a React component?',
        choices=['useEffect', 'useState', 'useContext', 'useRef'],
        correct_index=1,
    ),
    CheckboxQuestion(
        id=2,
        question='Which of the following are JavaScript frameworks?',
        choices=['React', 'Vue', 'Laravel', 'Angular'],
        correct_indexes=[0, 1, 3],
    ),
    TextQuestion(
        id=3,
        question='Which JavaScript library is used for building user interfaces with components?',
        correct_text='React',
    ),
    RadioQuestion(
        id=4,
        question='Which company developed TypeScript?',
        choices=['Google', 'Microsoft', 'Facebook', 'Amazon'],
        correct_index=1,
    ),
    CheckboxQuestion(
        id=5,
        question='Select all CSS units for relative sizing:',
        choices=['em', 'px', 'rem', '%'],
        correct_indexes=[0, 2, 3],
    ),
    TextQuestion(
        id=6,
        question='Which React hook is used to add state to a functional component?',
        correct_text='useState',
    ),
    RadioQuestion(
        id=7,
        question='Which HTTP method is used to retrieve data?',
        choices=['POST', 'PUT', 'GET', 'DELETE'],
        correct_index=2,
    ),
    CheckboxQuestion(
        id=8,
        question='Which are valid HTML elements?',
        choices=['<section>', '<main>', '<header>', '<body-text>'],
        correct_indexes=[0, 1, 2],
    ),
    RadioQuestion(
        id=9,
        question='Which hook lets you reference a DOM element directly in a functional component?',
        choices=['useEffect', 'useState', 'useRef', 'useContext'],
        correct_index=2,
    ),
    TextQuestion(
        id=10,
        question='What is the term for passing data from a parent component to a child component?',
        correct_text='props',
    ),
    CheckboxQuestion(
        id=11,
        question='Which of these are valid built-in React hooks?',
        choices=['useState', 'useEffect', 'useFetch', 'useRef'],
        correct_indexes=[0, 1, 3],
    ),
    RadioQuestion(
        id=12,
        question='Which of the following is NOT a JavaScript data type?',
        choices=['String', 'Boolean', 'Integer', 'Undefined'],
        correct_index=2,
    ),
]


def _shuffle_choices(question: Question, rng: random.Random) -> Question:
    if isinstance(question, TextQuestion):
        return question

    # order[new_position] == old_position
    order = list(range(len(question.choices)))
    rng.shuffle(order)
    choices = [question.choices[i] for i in order]

    if isinstance(question, RadioQuestion):
        return question.model_copy(
            update={'choices': choices, 'correct_index': order.index(question.correct_index)}
        )
    return question.model_copy(
        update={
            'choices': choices,
            'correct_indexes': [order.index(i) for i in question.correct_indexes],
        }
    )


def shuffle_questions(
    questions: Sequence[Question],
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Return a shuffled copy of the questions.

    Question order and choice order are both randomized; correct-index fields
    are remapped so they still point at the same choice text. The input list
    and its questions are left untouched.
    """
    rng = rng or random.Random()
    shuffled = list(questions)
    rng.shuffle(shuffled)
    return [_shuffle_choices(q, rng) for q in shuffled]
