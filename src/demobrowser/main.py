# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

from demobrowser.cli.gallery_cli import app


def main() -> None:
    """Run the command-line interface."""
    app(prog_name="demobrowser")


if __name__ == "__main__":
    main()
