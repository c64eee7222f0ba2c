"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_codec.py: one-line record format with field escaping
- task_store.py: flat-file load/save
- task_api.py: in-memory list operations used by the commands
"""
