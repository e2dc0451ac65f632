"""Domain layer for taskmeter.

- shared: Result monad and base domain event
- task: project rows, tasks, completion ratio, validation, row editing
"""
