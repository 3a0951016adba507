# quiz_api/runner.py
import asyncio
import re
import time
from typing import Any, Callable, List, Optional

import httpx
import typer

from . import config
from .client import QuizClient, QuizClientError
from .models import Answer, CheckboxQuestion, GradeResponse, Question, RadioQuestion

app = typer.Typer(help='Play a timed quiz round against a quiz server.')

Prompt = Callable[[str], str]
Clock = Callable[[], float]
Output = Callable[[str], Any]


def result_message(score: int, total: int) -> str:
    percentage = (score / total) * 100 if total else 0
    if percentage == 100:
        return "Perfect score! You're a tech wizard!"
    if percentage >= 75:
        return 'Great job! Almost perfect!'
    if percentage >= 50:
        return 'Not bad! Keep practicing!'
    if percentage > 0:
        return 'You can do better! Try again!'
    return 'Oops! 0 points. Better luck next time!'


def _choice_number(token: str, size: int) -> Optional[int]:
    if not token.isdecimal():
        return None
    index = int(token) - 1
    return index if 0 <= index < size else None


def parse_answer(question: Question, raw: str) -> Any:
    """
    Turn a line of terminal input into an answer value.

    Choices are numbered from 1 on screen. Returns None for blank or
    unreadable input.
    """
    raw = raw.strip()
    if not raw:
        return None

    if isinstance(question, RadioQuestion):
        index = _choice_number(raw, len(question.choices))
        if index is not None:
            return question.choices[index]
        return raw if raw in question.choices else None

    if isinstance(question, CheckboxQuestion):
        indexes = []
        for token in re.split(r'[\s,]+', raw):
            index = _choice_number(token, len(question.choices))
            if index is None:
                return None
            indexes.append(index)
        return sorted(set(indexes))

    return raw


def render_question(question: Question, out: Output) -> None:
    out(question.question)
    if isinstance(question, RadioQuestion):
        for number, choice in enumerate(question.choices, start=1):
            out(f'  {number}) {choice}')
        out('Pick one number.')
    elif isinstance(question, CheckboxQuestion):
        for number, choice in enumerate(question.choices, start=1):
            out(f'  [{number}] {choice}')
        out('Pick all that apply, separated by commas.')
    else:
        out('Type your answer.')


def ask_question(
    question: Question,
    prompt: Prompt = input,
    clock: Clock = time.monotonic,
    time_limit: float = config.TIME_LIMIT_S,
    out: Output = typer.echo,
) -> Any:
    """
    Ask one question and return the answer value, or None if unanswered.

    An answer typed after the time limit is dropped.
    """
    render_question(question, out)
    start = clock()
    raw = prompt(f'({time_limit:g}s) > ')
    if clock() - start > time_limit:
        out("Time's up! Moving on.")
        return None
    return parse_answer(question, raw)


async def play_round(
    client: QuizClient,
    prompt: Prompt = input,
    clock: Clock = time.monotonic,
    time_limit: float = config.TIME_LIMIT_S,
    out: Output = typer.echo,
) -> GradeResponse:
    """Fetch a shuffled quiz, ask every question and submit the answers."""
    questions = await client.fetch_quiz()
    answers: List[Answer] = []
    for number, question in enumerate(questions, start=1):
        out(f'\nQuestion {number}/{len(questions)}')
        # input() blocks; keep it off the event loop
        value = await asyncio.to_thread(ask_question, question, prompt, clock, time_limit, out)
        if value is not None:
            answers.append(Answer(id=question.id, value=value))

    result = await client.submit(answers, questions)
    out(f'\nQuiz complete! {result.score} / {result.total}')
    out(result_message(result.score, result.total))
    return result


async def _play(base_url: str, time_limit: float) -> GradeResponse:
    async with QuizClient(base_url) as client:
        return await play_round(client, time_limit=time_limit)


@app.command()
def play(
    base_url: str = typer.Option(config.API_BASE_URL, help='Quiz server base URL.'),
    time_limit: float = typer.Option(config.TIME_LIMIT_S, help='Seconds allowed per question.'),
):
    """Play one timed round."""
    try:
        asyncio.run(_play(base_url, time_limit))
    except QuizClientError as e:
        typer.echo(f'Server rejected the request: {e.message}', err=True)
        raise typer.Exit(code=1)
    except httpx.HTTPError as e:
        typer.echo(f'Could not reach quiz server at {base_url}: {e}', err=True)
        raise typer.Exit(code=1)


def main():
    app()


if __name__ == '__main__':
    main()
