"""rust-analyzer project files, coloured status lines and worked exercise solutions."""

__version__ = "5.3.0"