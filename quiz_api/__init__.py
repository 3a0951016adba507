# quiz_api/__init__.py
"""
Timed Quiz API

A FastAPI application that serves shuffled quiz questions and grades
submitted answers, plus a small terminal client for playing a round.
"""

__version__ = "1.0.0"
