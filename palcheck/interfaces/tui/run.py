"""
TUI Entry Point
"""
from .app import create_app


def run(config=None):
    """Start the checker and block until the user quits"""
    create_app(config).run()
