# quiz_api/config.py
import os


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get('QUIZ_CORS_ORIGINS', '*').split(',')
    if origin.strip()
]

LOG_LEVEL = os.environ.get('QUIZ_LOG_LEVEL', 'INFO')
LOG_JSON = _env_flag('QUIZ_LOG_JSON')

HOST = os.environ.get('QUIZ_HOST', '0.0.0.0')
PORT = int(os.environ.get('QUIZ_PORT', '8000'))

# Client side
API_BASE_URL = os.environ.get('QUIZ_API_BASE_URL', 'http://localhost:8000')
TIME_LIMIT_S = float(os.environ.get('QUIZ_TIME_LIMIT', '15'))
