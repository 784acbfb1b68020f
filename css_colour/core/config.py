"""Settings for the css-colour CLI, read from the environment and .env files.

Only CSS_COLOUR_* keys are taken from a .env file, and a key already in the
process environment is never replaced. The file is either the --env-file path
or the nearest .env between the cwd and the enclosing repository root.

Recognised variables:
  CSS_COLOUR_JSON          truthy (1/true/yes/on) makes JSON the default output
  CSS_COLOUR_SWATCH_SIZE   default swatch edge in pixels (default 64)
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SWATCH_SIZE = 64

_TRUTHY = {'1', 'true', 'yes', 'on'}


class ConfigError(ValueError):
    """A settings variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    json_output: bool = False
    swatch_size: int = DEFAULT_SWATCH_SIZE


# KEY=value, optional `export `, value optionally wrapped in matching quotes
_SETTING_LINE = re.compile(r'''(?:export\s+)?(CSS_COLOUR_\w+)\s*=\s*(?:"(.*)"|'(.*)'|(.*?))\s*''')


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env from start upwards. A directory holding .git is the last one searched."""
    for directory in (start.resolve(), *start.resolve().parents):
        if (directory / '.env').is_file():
            return directory / '.env'
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            break
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """CSS_COLOUR_* settings from a .env file; every other line is ignored."""
    settings: dict[str, str] = {}
    with open(path, encoding='utf-8') as f:
        for line in f:
            m = _SETTING_LINE.fullmatch(line.strip())
            if m:
                key, *quoted = m.groups()
                settings[key] = next((v for v in quoted if v is not None), '')
    return settings


def load_env(env_file: str | None = None) -> Path | None:
    """Apply .env settings that the process environment does not already define.

    Returns the .env path used, or None when there was nothing to read.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings() -> Settings:
    """Build Settings from os.environ. Raises ConfigError on a bad size."""
    json_output = os.environ.get('CSS_COLOUR_JSON', '').strip().lower() in _TRUTHY

    raw_size = os.environ.get('CSS_COLOUR_SWATCH_SIZE', '').strip()
    swatch_size = DEFAULT_SWATCH_SIZE
    if raw_size:
        try:
            swatch_size = int(raw_size)
        except ValueError as e:
            raise ConfigError(f'CSS_COLOUR_SWATCH_SIZE must be an integer, got {raw_size!r}') from e
        if swatch_size <= 0:
            raise ConfigError(f'CSS_COLOUR_SWATCH_SIZE must be positive, got {swatch_size}')

    return Settings(json_output=json_output, swatch_size=swatch_size)
