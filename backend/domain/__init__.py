"""
Domain layer: entities, aggregates, repository interfaces and business rules.
"""
