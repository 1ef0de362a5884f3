"""Main CLI entry point for like-and-subscribe tooling."""

import sys

from las_tooling import doctor
from las_tooling.cli.entity_cmd import run_entity_argv
from las_tooling.cli.parse_common import (
    configure_logging,
    load_config_or_exit,
    parse_project_args,
    pop_verbose,
)
from las_tooling.cli.tunnel_cmd import run_tunnel_argv


def _usage() -> None:
    print("Usage: las <command> [args...] [-v|--verbose]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print(
        "  entity generate        - Delete generated entities and rerun sea-orm-cli",
        file=sys.stderr,
    )
    print(
        "  entity migrate <action> - Run the migration crate (fresh, refresh, reset, status)",
        file=sys.stderr,
    )
    print(
        "  tunnel expose          - tailscale serve / and funnel /pubsub, then show status",
        file=sys.stderr,
    )
    print("  tunnel status|reset    - Show funnel status; remove registrations", file=sys.stderr)
    print("  doctor                 - Check sea-orm-cli, cargo, tailscale are installed", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    verbose, argv = pop_verbose(argv)
    configure_logging(verbose)

    if not argv:
        _usage()
        sys.exit(1)

    command = argv[0]
    args = argv[1:]

    if command == "entity":
        run_entity_argv(args)
    elif command == "tunnel":
        run_tunnel_argv(args)
    elif command == "doctor":
        usage = "las doctor [--project-root <path>] [--config <file>]"
        parsed, rest = parse_project_args(args, usage)
        if rest:
            print(f"Error: Unexpected argument: {rest[0]}", file=sys.stderr)
            sys.exit(1)
        cfg = load_config_or_exit(parsed["project_root"], parsed["config_path"])
        sys.exit(doctor.run(cfg))
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
