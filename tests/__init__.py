"""Tests for todo-tree."""
