__version__ = "0.1.0"

__all__ = [
    "__version__",
    "cli",
    "commands",
    "config",
    "core",
    "embedding",
    "errors",
    "exit_codes",
    "fragmentation",
    "indent",
]
