"""
Entry point for the `cargo-recursive` command-line interface.

cargo-recursive runs a command in every Cargo project found below a
directory. Installed on PATH it is also available as `cargo recursive`.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the cargo-recursive CLI."""
    from .cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
