"""style-checker — diagnostic harness for styling exercises."""

__version__ = '0.1.0'
