"""Workspaces, projects and tasks over a document store."""
