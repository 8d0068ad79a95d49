"""
Domain layer package.

Contains business logic: entities, value objects, domain services,
and port interfaces. No framework imports; IO happens only through
ports implemented in the infrastructure layer.
"""
