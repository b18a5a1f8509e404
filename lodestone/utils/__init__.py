"""Utility components for lodestone."""

from lodestone.utils.files import get_logs_path, get_project_root, init_state_dir
from lodestone.utils.headers import HeaderGenerator, UserAgentRotator
from lodestone.utils.logging import setup_local_logging

__all__ = [
    'HeaderGenerator',
    'UserAgentRotator',
    'get_logs_path',
    'get_project_root',
    'init_state_dir',
    'setup_local_logging',
]
