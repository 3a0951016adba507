# quiz_api/main.py
from typing import List

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from . import __version__, config
from .grading import grade_answers
from .log import configure_logging, get_logger
from .models import AnswerList, GradeResponse, Question, QuestionList
from .questions import QUIZ_QUESTIONS, shuffle_questions

configure_logging(config.LOG_LEVEL, json_output=config.LOG_JSON)
logger = get_logger(__name__)

app = FastAPI(title='Timed Quiz API', version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=['*'],
    allow_headers=['*']
)

router = APIRouter()


def _reject(message: str, reason: str) -> JSONResponse:
    logger.info('grade.rejected', reason=reason)
    return JSONResponse(status_code=400, content={'error': message})


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception('server.error', path=request.url.path)
    return JSONResponse(status_code=500, content={'error': 'Internal server error'})


@app.get('/')
async def root():
    """Root endpoint - API information"""
    return {
        'service': 'Timed Quiz API',
        'status': 'running',
        'version': __version__,
        'endpoints': {
            'health': '/health',
            'quiz': 'GET /quiz',
            'grade': 'POST /grade',
            'docs': '/docs'
        }
    }


@app.get('/health')
async def health_check():
    """Health check endpoint."""
    return {'status': 'healthy'}


@router.get('/quiz', response_model=List[Question])
async def get_quiz():
    """
    Serve the default question set with question and choice order shuffled.
    """
    try:
        questions = shuffle_questions(QUIZ_QUESTIONS)
    except Exception:
        logger.exception('quiz.failed')
        return JSONResponse(status_code=500, content={'error': 'Failed to load quiz.'})

    logger.info('quiz.served', total=len(questions))
    return questions


@router.post('/grade', response_model=GradeResponse)
async def grade(request: Request):
    """
    Grade submitted answers.

    Grades against the question list echoed back by the client when one is
    sent (it carries the shuffled indexes the player saw), otherwise against
    the default question set.
    """
    try:
        body = await request.json()
    except ValueError:
        return _reject('Invalid request or JSON', 'malformed_json')

    if not isinstance(body, dict) or 'answers' not in body:
        return _reject('Invalid payload - missing answers', 'missing_answers')

    try:
        answers = AnswerList.validate_python(body['answers'])
    except ValidationError:
        return _reject('Invalid payload - answers must be array of {id,value}', 'invalid_answers')

    sent_questions = body.get('questions')
    if sent_questions is None:
        questions = QUIZ_QUESTIONS
    else:
        try:
            questions = QuestionList.validate_python(sent_questions)
        except ValidationError:
            return _reject(
                'Invalid payload - questions must be a list of quiz questions',
                'invalid_questions',
            )

    return grade_answers(questions, answers)


app.include_router(router)
# Browser client path
app.include_router(router, prefix='/api', include_in_schema=False)


def run():
    import uvicorn
    uvicorn.run('quiz_api.main:app', host=config.HOST, port=config.PORT)


if __name__ == '__main__':
    run()
