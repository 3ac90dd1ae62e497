"""Expression calculator, book-swapping WSGI service and small utilities."""

__version__ = "0.1.0"