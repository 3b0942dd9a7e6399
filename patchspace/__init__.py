"""patchspace package: in-memory workspaces that agents edit through file tools.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
