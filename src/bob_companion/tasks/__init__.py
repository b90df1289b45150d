"""
Task subsystem.

Components:
- task_models.py: task variants (ToDo, Deadline, Event) and their shared capabilities
- task_list.py: the ordered task collection with filter/sort queries
- task_store.py: flat-file storage (one task per line)
"""
