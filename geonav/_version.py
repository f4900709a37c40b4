"""
Exposes the version of geonav
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ['__version__']

# Single source of truth for the version; setup.py reads the same file
_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'

try:
    __version__ = version('geonav')
except PackageNotFoundError:
    # Running from a source checkout that has not been installed
    __version__ = _VERSION_FILE.read_text(encoding='utf-8').strip()
