"""Allow ``python -m users_api`` to start the HTTP server."""

from users_api.server import main


if __name__ == "__main__":
    main()
