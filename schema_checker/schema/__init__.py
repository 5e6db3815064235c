"""JSON Schema documents shipped with the package.

``schema_document.json`` describes well-formed schema_checker schemas; it is
loaded by :mod:`schema_checker.models.meta_schema`.
"""
