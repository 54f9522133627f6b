__version__ = "0.1.0"

__all__ = [
    "__version__",
    "audit",
    "cli",
    "commands",
    "contracts",
    "core",
    "interpreters",
    "registry",
    "scan",
]
