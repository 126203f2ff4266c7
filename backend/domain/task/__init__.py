"""
Task Domain - Task groups and their tasks.

This domain handles the executable side of a project:
- Task groups instantiated from project step templates
- Tasks with absolute deadlines and done state
- Rules for opening groups and computing deadlines
"""
