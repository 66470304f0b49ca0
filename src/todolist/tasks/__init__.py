"""
Task subsystem.

Components:
- task_models.py: data structures (Task, CompleteOutcome) and store errors
- task_store.py: in-memory ordered storage with monotonic id assignment
- task_render.py: plain-text rendering of tasks for the console
"""
