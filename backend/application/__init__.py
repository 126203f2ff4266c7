"""
Application layer: services orchestrating the domain.
"""
