"""Convenience entrypoint for the demo.

Use `from gamestack.main import run` to construct and run the Application
defined in `gamestack.app`.
"""
from typing import Optional

from gamestack.config import Config


def run(config: Optional[Config] = None) -> None:
    from gamestack.app import Application

    Application(config).run()


if __name__ == "__main__":
    run()
