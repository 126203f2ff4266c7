"""
Infrastructure layer: persistence and wiring.
"""
