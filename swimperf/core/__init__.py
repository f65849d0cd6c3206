"""
Core business logic for swim performance results.

This module is framework-agnostic - it doesn't import pydantic, the
document store, or any infrastructure concerns. This separation means we
can test the engine in isolation and call it from any application shell.
"""
