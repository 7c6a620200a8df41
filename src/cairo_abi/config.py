"""Environment-driven settings for the cairo-abi CLI."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

OUTPUT_FORMATS = ('text', 'json')


def _env_flag(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class DecoderSettings:
    """Settings read from CAIRO_ABI_* environment variables."""

    log_level: str = 'WARNING'
    strict: bool = False
    output: str = 'text'

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Invalid log level '{self.log_level}'")
        if self.output not in OUTPUT_FORMATS:
            raise ValueError(f"Invalid output format '{self.output}'. Expected one of: {', '.join(OUTPUT_FORMATS)}")

    @classmethod
    def from_env(cls, **overrides) -> 'DecoderSettings':
        """Build settings from the environment, with explicit values taking precedence."""
        values = {
            'log_level': os.getenv('CAIRO_ABI_LOG_LEVEL', 'WARNING'),
            'strict': _env_flag(os.getenv('CAIRO_ABI_STRICT')),
            'output': os.getenv('CAIRO_ABI_OUTPUT', 'text').strip().lower(),
        }
        values.update(overrides)
        return cls(**values)
