"""Claude Code statusline: transcript analysis and status rendering."""

__version__ = "0.1.0"
