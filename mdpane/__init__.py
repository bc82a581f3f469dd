"""Two-pane markdown editor with live preview."""

__version__ = "0.1.0"
