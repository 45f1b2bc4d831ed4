"""printf-style formatting of %c %s %p %d %i %u %x %X with flags, width and precision, plus ASCII and string helpers."""

__version__ = "0.1.0"