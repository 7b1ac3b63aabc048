"""A small interactive shell with pipelines, redirection, background jobs and history."""

__version__ = "0.1.0"
__all__ = ["builtins", "executor", "history", "jobs", "parser", "shell"]