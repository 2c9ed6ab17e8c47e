"""UI-agnostic engine injecting AI completions into editor buffers."""

__all__ = [
    "buffer",
    "commands",
    "patch",
    "runtime",
    "suggestion",
]

__version__ = "0.1.0"
