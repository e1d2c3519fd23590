"""
Application Layer for the live workout session engine.

This package contains:
- ports/: Abstract collaborator interfaces (catalog, history, storage)
- use_cases/: Workflows that coordinate the engine with those collaborators
- exceptions.py: The session error taxonomy
"""
