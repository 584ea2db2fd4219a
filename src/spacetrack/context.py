"""Spacetrack context for passing state between commands."""

from pathlib import Path
from typing import Optional

import click

from .models.config import Config


class SpaceTrackContext:
    def __init__(self):
        self.config = Config()
        self.config_path: Optional[Path] = None


pass_context = click.make_pass_decorator(SpaceTrackContext, ensure=True)
