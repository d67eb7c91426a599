#!/usr/bin/env python3
"""
Main entry point for the Soccer Rotation Planner web application.

This script launches the Flask-based web server. Set SOCCER_ROTATION_ROSTER
to a JSON roster file to use a roster other than the built-in one.
"""
import os

from soccer_rotation.ui.web_app import run_web_app

if __name__ == "__main__":
    run_web_app(roster_path=os.environ.get("SOCCER_ROTATION_ROSTER"))
