"""
Domain Layer - Entities and persistence contracts.

This layer has no dependency on frameworks, databases or HTTP.
"""
