"""myshell package: a minimal interactive interpreter of built-in filesystem commands.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
