"""odb: a loose-object store for content-addressed git-style objects."""

__version__ = "0.1.0"
