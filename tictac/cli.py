"""
Tictac CLI - Command-line interface for the engine.

Usage:
    tictac serve [--host H] [--port P]    Run the HTTP API
    tictac play                           Play a local game in the terminal
"""

import argparse
import logging
import sys

from .config import Settings

log = logging.getLogger("tictac.cli")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tictac - Tic-Tac-Toe Game-State Engine",
        prog="tictac",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: $TICTAC_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address (default: $TICTAC_HOST or 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: $TICTAC_PORT or 8000)")

    # Play command
    subparsers.add_parser("play", help="Play a local game in the terminal")

    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValueError as e:
        parser.error(str(e))

    args.log_level = args.log_level or settings.log_level
    setup_logging(args.log_level)

    if args.command == "serve":
        if args.host is None:
            args.host = settings.host
        if args.port is None:
            args.port = settings.port
        cmd_serve(args, settings)
    elif args.command == "play":
        cmd_play(args)
    else:
        parser.print_help()
        sys.exit(1)


def setup_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def cmd_serve(args, settings: Settings):
    """Run the API under uvicorn."""
    import uvicorn
    from .api import create_app

    log.info("Serving on %s:%d (%s)", args.host, args.port, settings.env)
    uvicorn.run(
        create_app(settings=settings),
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


def render_board(state) -> str:
    """
    Draw a GameStateResponse as a 3x3 grid.

    Empty cells show their index so the player knows what to type.
    """
    cells = [
        mark if mark.strip() else str(i)
        for i, mark in enumerate(state.board)
    ]
    rows = [" | ".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n---------\n".join(f" {row}" for row in rows)


def describe(state) -> str:
    """One-line status for the current state."""
    if not state.game_over:
        return f"{state.current_player.value} to move"
    if state.winner.value == "draw":
        return "Draw!"
    return f"{state.winner.value} wins!"


def is_playable(state, position: int) -> bool:
    """Client-side mirror of the engine's rule: blank cell, game not over."""
    return not state.game_over and 0 <= position < 9 and not state.board[position].strip()


def cmd_play(args, input_fn=input, output_fn=print):
    """Interactive terminal game against a local engine."""
    from .api import APIService

    service = APIService()
    state = service.get_game_state()

    output_fn("Enter a cell 0-8 to move, 'r' to reset, 'q' to quit.")
    while True:
        output_fn("")
        output_fn(render_board(state))
        output_fn(describe(state))

        try:
            line = input_fn("> ").strip().lower()
        except EOFError:
            break

        if line in ("q", "quit"):
            break
        if line in ("r", "reset"):
            state = service.reset_game()
            continue
        if not line.isdecimal():
            output_fn(f"Not a cell: {line!r}")
            continue

        position = int(line)
        if not is_playable(state, position):
            continue
        state = service.make_move(position)

    return state


if __name__ == "__main__":
    main()
