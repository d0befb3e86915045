"""create-clean-arch: scaffold a layered TypeScript workspace."""

__version__ = "1.0.0"
