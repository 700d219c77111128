"""ebolg - Markdown posts to Tailwind-styled HTML pages."""

__version__ = "0.1.0"
