"""Strata core: context store, document loading, layering and merge policy."""
