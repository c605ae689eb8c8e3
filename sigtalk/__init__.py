"""Send text between processes, one bit per SIGUSR1/SIGUSR2 signal."""

__version__ = "0.1.0"
__all__ = ["chars", "client", "formatting", "protocol", "server", "textutil"]