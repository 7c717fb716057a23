"""CLI entry point and argument parsing"""

import sys
import logging
import argparse
from rich.console import Console


console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roblox Cookie Refresher")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the HTTP server (default)")
    serve.add_argument("--bind", "-b", default=None, help="Override bind address (default: from config)")
    serve.add_argument("--port", "-p", type=int, default=None, help="Override port (default: from config)")

    refresh = subparsers.add_parser("refresh", help="Refresh one cookie and print the new one")
    refresh.add_argument(
        "--cookie-file",
        "-f",
        default=None,
        help="File holding the cookie (default: read from stdin)"
    )
    return parser


def main(argv=None):
    """Entry point for the CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "refresh":
            logging.basicConfig(
                level=logging.DEBUG if args.debug else logging.WARNING,
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            )
            from cli.refresh_handlers import run_refresh
            sys.exit(run_refresh(args.cookie_file, console))

        from proxy import ProxyServer
        server = ProxyServer(
            debug=args.debug,
            bind_address=getattr(args, "bind", None),
            port=getattr(args, "port", None),
        )
        server.run()

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
    except Exception as e:
        console.print(f"\n[red]Fatal error:[/red] {e}")
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
