"""View contract linter: checks and fixes IView implementers."""

__version__ = "0.1.0"
