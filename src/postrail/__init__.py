"""postrail — a post resource behind a railway-oriented outcome pipeline."""

__version__ = "0.1.0"
