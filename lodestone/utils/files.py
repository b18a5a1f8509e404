"""Locations of files lodestone writes (logs) in the user's project."""

from pathlib import Path

STATE_DIR = '.lodestone'


def get_project_root() -> Path:
    """Find the project root by searching upwards from the current working directory.

    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()
    markers = {'.git', 'pyproject.toml', STATE_DIR}

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in markers):
            return parent

    return current_path


def get_logs_path() -> Path:
    """Return the path to the logs directory in .lodestone."""
    return get_project_root() / STATE_DIR / 'logs'


def init_state_dir() -> Path:
    """Create the .lodestone directory (git-ignored) and return it."""
    state_dir = get_project_root() / STATE_DIR
    (state_dir / 'logs').mkdir(parents=True, exist_ok=True)

    gitignore = state_dir / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by lodestone\n*\n')

    return state_dir
