"""
Tests for the HTTP endpoints
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from quiz_api.main import app
from quiz_api.questions import QUIZ_QUESTIONS


def _correct_answers(questions):
    answers = []
    for q in questions:
        if q['type'] == 'radio':
            value = q['choices'][q['correctIndex']]
        elif q['type'] == 'checkbox':
            value = q['correctIndexes']
        else:
            value = q['correctText']
        answers.append({'id': q['id'], 'value': value})
    return answers


class TestInfoEndpoints:

    def test_root(self, client):
        response = client.get('/')
        assert response.status_code == 200
        data = response.json()
        assert data['status'] == 'running'
        assert 'grade' in data['endpoints']

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        assert response.json() == {'status': 'healthy'}


class TestGetQuiz:

    @pytest.mark.parametrize('path', ['/quiz', '/api/quiz'])
    def test_returns_all_questions(self, client, path):
        response = client.get(path)
        assert response.status_code == 200
        data = response.json()
        assert len(data) == len(QUIZ_QUESTIONS)
        assert {q['id'] for q in data} == {q.id for q in QUIZ_QUESTIONS}

    def test_uses_camel_case_fields(self, client):
        data = client.get('/quiz').json()
        for q in data:
            if q['type'] == 'radio':
                assert 'correctIndex' in q
            elif q['type'] == 'checkbox':
                assert 'correctIndexes' in q
            else:
                assert 'correctText' in q

    def test_shuffled_quiz_grades_perfectly(self, client):
        questions = client.get('/quiz').json()
        response = client.post('/grade', json={
            'answers': _correct_answers(questions),
            'questions': questions,
        })
        assert response.status_code == 200
        data = response.json()
        assert data['score'] == data['total'] == len(questions)

    def test_failure_returns_500(self, client):
        with patch('quiz_api.main.shuffle_questions', side_effect=RuntimeError('boom')):
            response = client.get('/quiz')
        assert response.status_code == 500
        assert response.json() == {'error': 'Failed to load quiz.'}


class TestGrade:

    def test_defaults_to_builtin_questions(self, client):
        response = client.post('/api/grade', json={
            'answers': [{'id': 1, 'value': 'useState'}, {'id': '3', 'value': '  REACT!!! '}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data['total'] == len(QUIZ_QUESTIONS)
        assert data['score'] == 2
        assert [r['id'] for r in data['results']] == [q.id for q in QUIZ_QUESTIONS]

    def test_trusts_client_questions(self, client):
        questions = [{
            'id': 50,
            'type': 'checkbox',
            'question': 'Pick',
            'choices': ['a', 'b', 'c'],
            'correctIndexes': [2],
        }]
        response = client.post('/grade', json={
            'answers': [{'id': 50, 'value': [2]}],
            'questions': questions,
        })
        assert response.status_code == 200
        assert response.json() == {
            'score': 1,
            'total': 1,
            'results': [{'id': 50, 'correct': True}],
        }

    def test_empty_question_list_is_graded(self, client):
        response = client.post('/grade', json={'answers': [], 'questions': []})
        assert response.status_code == 200
        assert response.json() == {'score': 0, 'total': 0, 'results': []}

    def test_null_questions_use_default(self, client):
        response = client.post('/grade', json={'answers': [], 'questions': None})
        assert response.status_code == 200
        assert response.json()['total'] == len(QUIZ_QUESTIONS)

    def test_malformed_json(self, client):
        response = client.post(
            '/grade', content=b'{not json', headers={'Content-Type': 'application/json'}
        )
        assert response.status_code == 400
        assert response.json() == {'error': 'Invalid request or JSON'}

    @pytest.mark.parametrize('body', [{}, {'questions': []}, [], 'answers'])
    def test_missing_answers(self, client, body):
        response = client.post('/grade', json=body)
        assert response.status_code == 400
        assert response.json() == {'error': 'Invalid payload - missing answers'}

    @pytest.mark.parametrize('answers', [
        None,
        'answers',
        {'id': 1, 'value': 'x'},
        [{'id': 1}],
        [{'value': 'x'}],
        ['x'],
    ])
    def test_invalid_answers(self, client, answers):
        response = client.post('/grade', json={'answers': answers})
        assert response.status_code == 400
        assert response.json() == {
            'error': 'Invalid payload - answers must be array of {id,value}'
        }

    @pytest.mark.parametrize('questions', [
        'all',
        [{'id': 1, 'type': 'slider', 'question': '?'}],
        [{'id': 1, 'type': 'radio', 'question': '?', 'choices': ['a']}],
    ])
    def test_invalid_questions(self, client, questions):
        response = client.post('/grade', json={'answers': [], 'questions': questions})
        assert response.status_code == 400
        assert 'questions' in response.json()['error']

    def test_null_value_is_accepted_and_incorrect(self, client):
        response = client.post('/grade', json={'answers': [{'id': 1, 'value': None}]})
        assert response.status_code == 200
        assert response.json()['results'][0] == {'id': 1, 'correct': False}

    def test_unexpected_error_returns_500(self):
        client = TestClient(app, raise_server_exceptions=False)
        with patch('quiz_api.main.grade_answers', side_effect=RuntimeError('boom')):
            response = client.post('/grade', json={'answers': []})
        assert response.status_code == 500
        assert response.json() == {'error': 'Internal server error'}

    def test_cors_headers(self, client):
        response = client.get('/quiz', headers={'Origin': 'http://localhost:3000'})
        assert response.headers.get('access-control-allow-origin') == '*'
