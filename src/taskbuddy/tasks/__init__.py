"""
Task subsystem.

Components:
- task_models.py: Todo / Deadline / Event variants and EditResult
- task_list.py: ordered, 1-indexed task collection
- task_store.py: flat-file storage (one task record per line)
"""
