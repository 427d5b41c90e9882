"""Entry point for the Workout Builder backend."""

import argparse
import json
import logging
import sys


def _run_select(args: argparse.Namespace) -> int:
    from pydantic import ValidationError

    from workout_builder.context import create_context
    from workout_builder.db.session import init_db
    from workout_builder.server.schemas import GetExercisesRequest
    from workout_builder.services import ExerciseSelectionService

    try:
        request = GetExercisesRequest(
            muscles=args.muscle, equipment=args.equipment, limit=args.limit
        )
    except ValidationError as e:
        print(f"Invalid selection request: {e}", file=sys.stderr)
        return 2

    ctx = create_context(seed=args.seed)
    init_db(ctx.engine)

    with ctx.session() as session:
        service = ExerciseSelectionService(session, ctx.settings, ctx.rng)
        result = service.get_exercises(request.muscles, request.equipment, request.limit).map(
            lambda groups: [group.to_dict() for group in groups]
        )
        if result.is_err:
            print(result.error, file=sys.stderr)
            return 1
        print(json.dumps(result.unwrap(), indent=2))
    return 0


def _run_seed() -> int:
    from workout_builder.context import create_context
    from workout_builder.db.session import init_db

    ctx = create_context()
    init_db(ctx.engine)
    print(f"Database ready: {ctx.settings.database_url}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the workout-builder CLI."""
    parser = argparse.ArgumentParser(
        description="Workout Builder - weighted exercise selection backend",
        prog="workout-builder",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("server", help="Start the HTTP server")
    server_parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)",
    )
    server_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    # Seed command
    subparsers.add_parser("seed", help="Create tables and seed the exercise library")

    # Select command
    select_parser = subparsers.add_parser("select", help="Print an exercise selection as JSON")
    select_parser.add_argument(
        "--muscle", "-m",
        action="append",
        required=True,
        type=str.upper,
        help="Muscle to train (repeatable)",
    )
    select_parser.add_argument(
        "--equipment", "-e",
        action="append",
        required=True,
        type=str.upper,
        help="Available equipment (repeatable)",
    )
    select_parser.add_argument(
        "--limit", "-n",
        type=int,
        default=3,
        help="Exercises per muscle (default: 3)",
    )
    select_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible selection",
    )

    args = parser.parse_args(argv)

    if args.command == "server":
        import uvicorn

        uvicorn.run(
            "workout_builder.server.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return 0

    logging.basicConfig(level=logging.WARNING)

    if args.command == "seed":
        return _run_seed()

    if args.command == "select":
        return _run_select(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
