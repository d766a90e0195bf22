"""
Pydantic schema definitions for API payloads.

Schemas describe the wire representation only.  Field rules such as the
name length and the date format are enforced by the service layer so
that violations surface as ``ValidationError`` for every caller.
"""
