import argparse
import json
import sys

from rich.console import Console
from rich.table import Table

from deeplink.container import container
from deeplink.exceptions import InvalidProtocolError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="deeplink",
        description="Inspect emulator deep-link URLs.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    parse_cmd = sub.add_parser("parse", help="Parse a URL and show its route and arguments")
    parse_cmd.add_argument("url", help="Deep-link URL, e.g. bfemulator://bot.open?path=...")
    parse_cmd.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    args = parser.parse_args(argv)

    try:
        command = container.get_parser().parse(args.url)
    except InvalidProtocolError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    routes = container.get_dispatcher().routes
    known = command.action in routes.get(command.domain, ())

    if args.json:
        payload = {**command.get_details(), "known_route": known}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    console = Console()
    table = Table(title=f"{command.route}" + ("" if known else " (unknown route)"))
    table.add_column("argument", style="cyan")
    table.add_column("value")
    for key, value in command.args.items():
        table.add_row(key, value)
    console.print(table)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
