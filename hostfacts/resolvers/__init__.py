"""Fact resolvers."""

from .processor_resolver import ProcessorResolver

__all__ = ["ProcessorResolver"]
