# quiz_api/client.py
from typing import Any, Dict, List, Optional, Sequence

import httpx

from .models import Answer, GradeResponse, Question, QuestionList


class QuizClientError(Exception):
    """Raised when the quiz server answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f'{status_code}: {message}')
        self.status_code = status_code
        self.message = message


class QuizClient:
    """
    Async client for the quiz endpoints.

    Use as an async context manager:

        async with QuizClient('http://localhost:8000') as client:
            questions = await client.fetch_quiz()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> 'QuizClient':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _raise_for_status(resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            message = resp.json().get('error', resp.text)
        except (ValueError, AttributeError):
            message = resp.text
        raise QuizClientError(resp.status_code, message)

    async def fetch_quiz(self) -> List[Question]:
        resp = await self._client.get('/api/quiz')
        self._raise_for_status(resp)
        return QuestionList.validate_python(resp.json())

    async def submit(
        self,
        answers: Sequence[Answer],
        questions: Optional[Sequence[Question]] = None,
    ) -> GradeResponse:
        """
        Submit answers for grading.

        Pass the questions exactly as they were shown so the server grades
        against the same shuffled choice order.
        """
        payload: Dict[str, Any] = {
            'answers': [a.model_dump() for a in answers],
        }
        if questions is not None:
            payload['questions'] = QuestionList.dump_python(
                list(questions), mode='json', by_alias=True
            )

        resp = await self._client.post('/api/grade', json=payload)
        self._raise_for_status(resp)
        return GradeResponse.model_validate(resp.json())
