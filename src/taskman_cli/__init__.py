"""taskman - a small command-line task tracker."""

__version__ = "0.1.0"
