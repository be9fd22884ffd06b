"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter)
- task_errors.py: error taxonomy (ValidationError, NotFoundError, InvalidFilterError)
- task_manager.py: in-memory TodoListManager (id allocation, CRUD, filtered listing)
"""
