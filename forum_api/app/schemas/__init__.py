"""
Pydantic schema definitions for API payloads.

Questions and answers each define their request bodies, the record
shape returned to clients and the ``{message, data}`` envelopes.
"""
