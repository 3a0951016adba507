"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from quiz_api.main import app
from quiz_api.models import CheckboxQuestion, RadioQuestion, TextQuestion


@pytest.fixture
def client():
    """Create test client"""
    return TestClient(app)


@pytest.fixture
def radio_question():
    return RadioQuestion(
        id=1,
        question='Which HTTP method is used to retrieve data?',
        choices=['POST', 'PUT', 'GET', 'DELETE'],
        correct_index=2,
    )


@pytest.fixture
def checkbox_question():
    return CheckboxQuestion(
        id=2,
        question='Select all CSS units for relative sizing:',
        choices=['em', 'px', 'rem', '%'],
        correct_indexes=[0, 2, 3],
    )


@pytest.fixture
def text_question():
    return TextQuestion(
        id=3,
        question='Which JavaScript library is used for building user interfaces?',
        correct_text='React',
    )


@pytest.fixture
def mixed_questions(radio_question, checkbox_question, text_question):
    return [radio_question, checkbox_question, text_question]
