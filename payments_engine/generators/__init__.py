"""Synthetic transaction stream generators."""

from payments_engine.generators.transaction import TransactionStreamGenerator

__all__ = ["TransactionStreamGenerator"]
