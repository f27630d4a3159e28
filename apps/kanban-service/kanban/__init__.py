"""Kanban persistence service: users, tags and work items."""
