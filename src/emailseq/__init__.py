"""emailseq — email sequence service and CLI."""

__version__ = "0.1.0"
