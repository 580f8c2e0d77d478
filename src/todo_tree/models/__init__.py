"""Domain models for todo-tree."""
