from __future__ import annotations

import argparse
import logging
from pathlib import Path

import httpx
from rich.console import Console
from rich.table import Table

from aptos_mock.config import resolve_token
from aptos_mock.constants import DEFAULT_RPC_URL, TOKEN_ENV_VAR
from aptos_mock.errors import AptosMockError
from aptos_mock.manifest import qualified_name
from aptos_mock.pipeline import create_mock_package
from aptos_mock.resolver import resolve_dependencies
from aptos_mock.rpc import AptosRpcClient

logger = logging.getLogger(__name__)
console = Console()

EXAMPLES = """examples:
  aptos-mock create 0x1 AptosStdlib ./output     Create a mock of the AptosStdlib package
  aptos-mock create 0x1 AptosStdlib --token YOUR_TOKEN
                                                 Create a mock with a Bearer token
  aptos-mock deps 0xabc MyPackage                List the packages MyPackage depends on
"""


def _client_from_args(args: argparse.Namespace) -> AptosRpcClient:
    token = resolve_token(args.token, env_file=args.env_file)
    console.print(f"Using RPC: {args.rpc}")
    if token:
        console.print("Using Bearer token for authentication")
    return AptosRpcClient(args.rpc, token=token)


def run_create(args: argparse.Namespace) -> None:
    console.print(f"Using account: {args.account}")
    console.print(f"Target package: {args.package}")
    console.print(f"Output directory: {args.directory / args.package}")

    with _client_from_args(args) as client:
        result = create_mock_package(client, args.account, args.package, args.directory, show_progress=True)

    console.print(f"Collected {len(result.dependencies)} unique dependencies")
    console.print(f"[green]All operations completed successfully![/green] Mock package at {result.root_dir}")


def run_deps(args: argparse.Namespace) -> None:
    with _client_from_args(args) as client:
        deps = resolve_dependencies(client, args.account, args.package)

    table = Table(title=f"Dependencies of {args.account}::{args.package}")
    table.add_column("#", justify="right")
    table.add_column("Account")
    table.add_column("Package")
    table.add_column("Folder")
    for i, dep in enumerate(deps.values(), start=1):
        table.add_row(str(i), dep.account, dep.package_name, qualified_name(dep.package_name, dep.account))
    console.print(table)
    console.print(f"{len(deps)} unique dependencies (framework packages excluded)")


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("account", type=str, help="Account address")
    p.add_argument("package", type=str, help="Package name")
    p.add_argument("-r", "--rpc", type=str, default=DEFAULT_RPC_URL, help="RPC URL")
    p.add_argument(
        "-t",
        "--token",
        type=str,
        help=f"Bearer token for API authentication (default: ${TOKEN_ENV_VAR})",
    )
    p.add_argument("--env-file", type=Path, default=Path(".env"), help=f"Optional .env file providing {TOKEN_ENV_VAR}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aptos-mock",
        description="Rebuild a Move source skeleton for a package published on Aptos",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_create = subparsers.add_parser("create", help="Create a mock Aptos package")
    _add_common_args(p_create)
    p_create.add_argument("directory", type=Path, nargs="?", default=Path("./"), help="Target directory")

    p_deps = subparsers.add_parser("deps", help="Resolve and list transitive dependencies")
    _add_common_args(p_deps)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        if args.command == "create":
            run_create(args)
        elif args.command == "deps":
            run_deps(args)
    except (AptosMockError, httpx.HTTPError, OSError) as e:
        console.print(f"[red]Command failed:[/red] {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
