"""Building blocks of a justfile command runner: search, shebangs, tokens, scopes and errors."""

__version__ = "0.1.0"