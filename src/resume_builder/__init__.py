"""AI-assisted resume builder: profile quiz, content generation, PDF export."""

__version__ = "0.1.0"
