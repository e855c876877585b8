"""Main entry point for the puzzle_solver package."""
from puzzle_solver.cli import cli


def main():
    """Main entry point function."""
    cli()


if __name__ == "__main__":
    main()
