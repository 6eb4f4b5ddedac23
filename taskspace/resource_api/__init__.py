"""Resource API service: HTTP CRUD over workspaces, projects and tasks."""
