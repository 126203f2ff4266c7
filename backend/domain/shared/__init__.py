"""
Shared domain building blocks: base entities, events and exceptions.
"""
