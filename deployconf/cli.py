"""Command line interface for deployconf."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, Dict, List, Optional

from deployconf import assembler, config, environment, utils
from deployconf.errors import DeployConfigError
from deployconf.logger import setup_logger
from deployconf.models import EnvironmentContext


class DeployConfCLI:
    """Runs one deployconf command against a loaded environment."""

    def __init__(self, context: EnvironmentContext) -> None:
        self.context = context
        self.actions: Dict[str, Callable[[argparse.Namespace], None]] = {
            "show": self.show_configuration,
            "networks": self.list_networks,
            "check": self.check_network,
        }

    def run(self, args: argparse.Namespace) -> int:
        """Dispatch a parsed command. Returns the process exit status."""
        print(f"{utils.bold('Environment:')} {utils.environment_label(self.context.name)}")

        try:
            self.actions[args.command](args)
        except (DeployConfigError, ConnectionError) as e:
            utils.error(str(e))
            return 1
        return 0

    def show_configuration(self, args: argparse.Namespace) -> None:
        """Print the resolved configuration without touching any credential."""
        resolved = assembler.assemble(self.context)
        print(json.dumps(resolved.to_dict(), indent=2))

    def list_networks(self, args: argparse.Namespace) -> None:
        rows = []
        for name in config.list_networks():
            profile = config.resolve(name)
            rows.append((name, f"chain {profile.chain_id} ({profile.native_symbol}) via {profile.rpc_url}"))
        utils.print_table("Registered networks", rows)

    def check_network(self, args: argparse.Namespace) -> None:
        """Build the transport for one network and optionally verify the node."""
        resolved = assembler.assemble(self.context)
        builder = resolved.select(args.network)
        utils.section_header(f"Network {args.network}")
        transport = builder.build()
        utils.result(f"Signer address: {transport.address}")
        utils.info(f"RPC endpoint: {transport.rpc_url}")
        utils.info(f"Chain ID: {transport.chain_id}")

        if args.verify:
            remote_chain_id = transport.verify()
            utils.success(f"Node at {transport.rpc_url} reports chain id {remote_chain_id}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deployconf",
        description="Resolve contract deployment configuration per environment and network",
    )
    parser.add_argument(
        "--env",
        default=None,
        help=f"Environment to load (default: ${config.RUNTIME_ENV_VARIABLE} or '{config.DEFAULT_ENVIRONMENT}')",
    )
    parser.add_argument(
        "--envs-dir",
        default=config.DEFAULT_ENVS_DIR,
        help="Directory holding the .env files",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("show", help="Print the resolved configuration")
    subparsers.add_parser("networks", help="List registered networks")
    check = subparsers.add_parser("check", help="Build the signing transport for a network")
    check.add_argument("network", help="Network name (e.g. testnet, mainnet)")
    check.add_argument(
        "--verify",
        action="store_true",
        help="Also contact the node and compare its chain id",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logger(level=args.log_level)

    context = environment.load_environment(args.env, args.envs_dir)
    return DeployConfCLI(context).run(args)


if __name__ == "__main__":
    sys.exit(main())
