# src/todolist/__init__.py

"""In-memory to-do list with a console front end."""

__version__ = "0.1.0"
