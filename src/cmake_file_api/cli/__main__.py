"""Module entrypoint for the cmake-file-api CLI."""

from __future__ import annotations

from cmake_file_api.cli.app import main

if __name__ == "__main__":
    main()
