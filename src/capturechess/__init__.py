"""capturechess — two-player chess where capturing the king wins."""

__version__ = "0.1.0"
