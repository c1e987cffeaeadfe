__version__ = "0.1.0"

__all__ = [
    "__version__",
    "audit",
    "cli",
    "contracts",
    "core",
    "errors",
    "exit_codes",
]
