"""Entry point for running detect-agent as a module.

Usage:
    python -m detect_agent
    python -m detect_agent cursor gemini --json
"""

from detect_agent.cli import app

if __name__ == "__main__":
    app()
