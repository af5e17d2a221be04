"""
Entry point for running weathercli as a module: python -m weathercli
"""

from weathercli.cli.commands import app

if __name__ == "__main__":
    app()
