"""Command-line entry point for the envoi resolver."""

from envoi_resolver.scripts.resolve_cli import main

if __name__ == "__main__":
    main()
