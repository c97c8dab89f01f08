"""Resolver package for the GraphQL schema.

Resolvers read the caller and the data sources from the request context and
convert data source records into GraphQL types.
"""

# Intentionally empty; functions are defined in sibling modules.
