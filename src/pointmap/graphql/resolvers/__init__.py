"""Resolver package for the GraphQL schema.

Types, queries and mutations import resolver functions lazily from the
sibling modules to avoid circular imports between object types.
"""
