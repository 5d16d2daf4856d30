"""Resolver functions referenced by the GraphQL types, queries and mutations.

Each module reads the entity store from the resolver context and converts
store records into GraphQL types.
"""
