"""Runtime settings for the host loop, with environment overrides."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .animation import transition_duration
from .theme import Theme

ENV_PREFIX = 'TERM_MODAL_'

_FALSE_VALUES = {'0', 'false', 'no', 'off'}


@dataclass(frozen=True)
class RuntimeConfig:
    """Settings for :class:`~term_modal.controller.ComponentController`.

    Attributes:
        fps: Frames per second; also the input polling rate
        mouse: Whether to enable terminal mouse reporting
        theme: Name of the preset Theme to use
        log_file: Path of the log file, or None to disable logging output
        log_level: Logging level name
    """
    fps: float = 60.0
    mouse: bool = True
    theme: str = 'dark'
    log_file: Optional[str] = None
    log_level: str = 'INFO'

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")
        Theme.named(self.theme)

    @property
    def tick_interval(self):
        """Seconds between frames."""
        return 1.0 / self.fps

    @property
    def transition_duration(self):
        """Seconds a modal appear or disappear transition takes."""
        return transition_duration(self.fps)

    def make_theme(self) -> Theme:
        return Theme.named(self.theme)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RuntimeConfig':
        """Build a config from ``TERM_MODAL_*`` environment variables."""
        environ = os.environ if environ is None else environ
        kwargs = {}

        fps = environ.get(ENV_PREFIX + 'FPS')
        if fps:
            try:
                kwargs['fps'] = float(fps)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}FPS must be a number, got {fps!r}") from None

        mouse = environ.get(ENV_PREFIX + 'MOUSE')
        if mouse:
            kwargs['mouse'] = mouse.strip().lower() not in _FALSE_VALUES

        for name in ('theme', 'log_file', 'log_level'):
            value = environ.get(ENV_PREFIX + name.upper())
            if value:
                kwargs[name] = value

        return cls(**kwargs)
