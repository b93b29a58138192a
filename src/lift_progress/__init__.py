"""Lift Progress: strength training progress analytics."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lift-progress")
except PackageNotFoundError:
    __version__ = "0.1.0"
