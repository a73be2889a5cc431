"""cmdguard — block destructive shell commands before an agent runs them."""

__version__ = "0.1.0"
