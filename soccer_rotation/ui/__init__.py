"""
User interface package for the Soccer Rotation Planner.

This package contains the Flask web interface.
"""
from .web_app import WebAppState, create_app, run_web_app

__all__ = ["WebAppState", "create_app", "run_web_app"]
