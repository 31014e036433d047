"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies only; records are kept
in the store as plain dictionaries so that unknown fields survive a
load/save cycle untouched.
"""
