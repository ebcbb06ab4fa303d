"""CLI commands for user-sessions."""

import argparse
import logging
import sys

from sqlalchemy.orm import Session

from user_sessions.config import get_settings
from user_sessions.database import SessionLocal, configure_engine, init_database
from user_sessions.models.user import User

DEFAULT_HOST = "0.0.0.0"


def fix_addr(addr: str) -> str:
    """Turn a bare port into a listen address by prefixing a colon."""
    if ":" not in addr:
        return f":{addr}"
    return addr


def split_addr(addr: str) -> tuple[str, int]:
    """Split a listen address into host and port. An empty host binds everywhere."""
    host, _, port = fix_addr(addr).rpartition(":")
    return host or DEFAULT_HOST, int(port)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def serve(port: str | None = None, config: str | None = None) -> None:
    """Run the HTTP service."""
    import uvicorn

    settings = get_settings(config)
    configure_logging(settings.log_level)
    configure_engine(settings.database_url, settings.database_echo)

    host, port_number = split_addr(port or settings.listen_port)
    logging.getLogger(__name__).info("Listening on %s:%d", host, port_number)

    from user_sessions.main import app

    uvicorn.run(app, host=host, port=port_number, log_level=settings.log_level.lower())


def init_db(config: str | None = None) -> None:
    """Create tables in the configured database."""
    settings = get_settings(config)
    configure_engine(settings.database_url, settings.database_echo)
    init_database()

    print("Database tables created.")


def create_user(username: str) -> None:
    """Create a user row (development seeding only)."""
    db: Session = SessionLocal()

    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            print(f"Error: User '{username}' already exists.")
            sys.exit(1)

        db.add(User(username=username))
        db.commit()

        print(f"User created successfully: {username}")

    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="user-sessions service")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service")
    serve_parser.add_argument(
        "--port", help="Listen port or address (defaults to LISTEN_PORT, 60000)"
    )
    serve_parser.add_argument("--config", help="Path to an env file with settings")

    # create-user command
    create_user_parser = subparsers.add_parser(
        "create-user", help="Create a user for local development"
    )
    create_user_parser.add_argument("--username", required=True, help="Username")

    # init-db command
    init_db_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_db_parser.add_argument("--config", help="Path to an env file with settings")

    args = parser.parse_args()

    if args.command == "serve":
        serve(args.port, args.config)
    elif args.command == "create-user":
        create_user(args.username)
    elif args.command == "init-db":
        init_db(args.config)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
