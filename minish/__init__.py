"""Shell building blocks: environment, expansion, lexing, word splitting and builtins."""

__version__ = "0.1.0"
__all__ = ["__version__"]