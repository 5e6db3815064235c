"""File location helpers shared by the lint tooling."""

from .source_location import SourceLocation, SourceMap, format_source, lookup_source

__all__ = ["SourceLocation", "SourceMap", "format_source", "lookup_source"]
