"""
Django app holding ORM models, migrations and repository implementations.
"""
