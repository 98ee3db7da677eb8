"""
GraphQL API for Pointmap
"""
