#!/usr/bin/env python3
"""CLI entry point for Portline.

Starts the API server on port 3000. Requires API_KEY in the environment
or in a .env file.

For ASGI deployment, use portline.app:create_app instead.
"""

from portline.main import main

if __name__ == "__main__":
    main()
