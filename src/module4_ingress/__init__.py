# file: src/module4_ingress/__init__.py
"""
Module 4: Ingress

HTTP surface of the link hop. Accepts segments on POST /code, acknowledges
immediately and hands each one to the transfer dispatcher.
"""

from .app import create_app
from .schemas import CodeRequest

__all__ = [
    'create_app',
    'CodeRequest',
]
