#!/usr/bin/env python3
"""Development server runner for the Message Board API."""

import sys

from message_board import create_app
from message_board.config import Settings


def main():
    """Run the development server."""
    try:
        settings = Settings.from_env()
        app = create_app(settings)

        app.logger.info(f"Starting Message Board on http://{settings.host}:{settings.port}")
        print(f"✅ Message Board listening on http://{settings.host}:{settings.port}")
        print(f"📝 Debug mode: {settings.debug}")
        print("🛑 Press Ctrl+C to stop the server")

        app.run(
            host=settings.host,
            port=settings.port,
            debug=settings.debug
        )

    except (OSError, ValueError) as e:
        print(f"❌ Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
