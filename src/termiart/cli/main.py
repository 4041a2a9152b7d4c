"""Main CLI entry point."""

from termiart.cli.app import create_app


def main() -> None:
    """Main CLI entry point."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
