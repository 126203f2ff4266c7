"""
Project Domain - Projects and their step templates.

This domain handles the plans tasks are instantiated from:
- Creating projects with step templates
- Each step carries a day offset relative to a reference date
"""
