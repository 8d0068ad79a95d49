"""
HTTP interface for the credit bounded context.

Routers for customers and credits, their Pydantic schemas,
and the dependency functions that wire use cases together.
"""
