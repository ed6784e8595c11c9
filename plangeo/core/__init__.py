"""Internal implementation package for plangeo.

Import public symbols from the top-level ``plangeo`` package; module paths
under ``plangeo.core`` may change.
"""
