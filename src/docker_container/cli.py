"""Command-line interface for docker-container."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional, Tuple

from docker_container import __version__
from docker_container.core.container import DockerContainer
from docker_container.core.options import RunOptions
from docker_container.errors import InvalidOptionsError


def _split_pair(value: str, sep: str, metavar: str) -> Tuple[str, str]:
    left, found, right = value.partition(sep)
    if not found or not left or not right:
        raise argparse.ArgumentTypeError(f"expected {metavar}, got {value!r}")
    return left, right


def _port_arg(value: str) -> Dict[str, str]:
    container_port, host_port = _split_pair(value, ":", "CONTAINER:HOST")
    return {"from": container_port, "to": host_port}


def _env_arg(value: str) -> Tuple[str, str]:
    return _split_pair(value, "=", "KEY=VALUE")


def _link_arg(value: str) -> Tuple[str, str]:
    return _split_pair(value, ":", "SOURCE:ALIAS")


def _volume_arg(value: str) -> Tuple[str, str]:
    host_path, guest_path = _split_pair(value, ":", "HOST:GUEST")
    return guest_path, host_path


def _run_options(args: argparse.Namespace) -> RunOptions:
    raw = {}
    if args.port:
        raw["ports"] = args.port
    if args.env:
        raw["env"] = dict(args.env)
    if args.link:
        raw["links"] = dict(args.link)
    if args.volume:
        raw["volumes"] = dict(args.volume)
    return RunOptions.from_value(raw)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docker-container",
        description="Pull an image if needed and run it as a named container"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands"
    )

    pull_parser = subparsers.add_parser(
        "pull",
        help="Pull an image unless it already exists locally"
    )
    pull_parser.add_argument("image", help="Image tag, e.g. nginx:alpine")

    run_parser = subparsers.add_parser(
        "run",
        help="Create and start a named container"
    )
    run_parser.add_argument("image", help="Image tag, e.g. nginx:alpine")
    run_parser.add_argument("name", help="Container name")
    run_parser.add_argument(
        "--port",
        action="append",
        type=_port_arg,
        metavar="CONTAINER:HOST",
        help="Publish a container TCP port on a host port (repeatable)"
    )
    run_parser.add_argument(
        "--env",
        action="append",
        type=_env_arg,
        metavar="KEY=VALUE",
        help="Set an environment variable (repeatable)"
    )
    run_parser.add_argument(
        "--link",
        action="append",
        type=_link_arg,
        metavar="SOURCE:ALIAS",
        help="Link another container under an alias (repeatable)"
    )
    run_parser.add_argument(
        "--volume",
        action="append",
        type=_volume_arg,
        metavar="HOST:GUEST",
        help="Bind-mount a host path into the container (repeatable)"
    )
    run_parser.add_argument(
        "--no-pull",
        action="store_true",
        help="Do not pull the image before running"
    )

    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the docker-container CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        print(f"docker-container version {__version__}")
        return 0

    if args.command not in ("pull", "run"):
        parser.print_help()
        return 1

    options = None
    if args.command == "run":
        try:
            options = _run_options(args)
        except InvalidOptionsError as e:
            parser.error(str(e))

    container = DockerContainer(args.image, getattr(args, "name", args.image))
    try:
        if args.command == "pull":
            pulled = container.pull_if_needed()
            print(f"Pulled {args.image}" if pulled else f"{args.image} already present")
            return 0

        if not args.no_pull:
            container.pull_if_needed()
        handle = container.run(options)
        print(handle.id)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
