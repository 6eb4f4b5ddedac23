import click


@click.group()
def main() -> None:
    """Taskspace - workspaces, projects and tasks over MongoDB."""


@main.command()
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development.")
def serve(reload: bool) -> None:
    """Start the Resource API server (HOST / PORT from the environment)."""
    import uvicorn

    from taskspace.resource_api.settings import TaskspaceSettings

    settings = TaskspaceSettings()

    uvicorn.run(
        "taskspace.resource_api.app:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_level="warning",  # uvicorn's own logging is intercepted by loguru
    )


if __name__ == "__main__":
    main()
