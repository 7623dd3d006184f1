# Path: hashify_cli/output/__init__.py
"""
Output Module for hashify_cli

Console listings: banner, usage, algorithms and profiles. Digest output
itself is produced by the user's output script.
"""

from .listings import print_algorithms, print_banner, print_profiles, print_usage

__all__ = [
    'print_algorithms',
    'print_banner',
    'print_profiles',
    'print_usage',
]
