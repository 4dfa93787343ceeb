"""Guppy -- a dashboard core for scaffolding and running JavaScript projects."""

__version__ = "0.1.0"
