"""TabSense ML: two-pass multi-dimensional browser tab classification."""

__version__ = "0.1.0"
