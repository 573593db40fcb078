"""
Entry point for running searchbot as a module: python -m searchbot
"""

from searchbot.cli.commands import app

if __name__ == "__main__":
    app()
