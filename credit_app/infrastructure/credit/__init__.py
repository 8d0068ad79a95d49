"""
Infrastructure adapters for the credit bounded context.

Each adapter implements a domain port (ABC) and connects
to the relational database through a SQLAlchemy engine.
"""
