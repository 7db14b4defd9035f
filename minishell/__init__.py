"""Line parsing, variable expansion, syntax checks and builtins for a small command shell."""

__version__ = "0.1.0"
__all__ = [
    "builtins",
    "environment",
    "errors",
    "expansion",
    "exports",
    "quoting",
]