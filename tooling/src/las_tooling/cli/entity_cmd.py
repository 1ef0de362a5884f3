"""CLI for entity: las entity generate | migrate <action>."""

from __future__ import annotations

import sys

from las_tooling.cli.parse_common import load_config_or_exit, parse_project_args
from las_tooling.entity import MIGRATION_ACTIONS, run_migrate, run_regenerate

GENERATE_USAGE = (
    "las entity generate [--project-root <path>] [--config <file>] [--database-url <url>]"
)
MIGRATE_USAGE = (
    f"las entity migrate <{'|'.join(MIGRATION_ACTIONS)}> "
    "[--project-root <path>] [--config <file>] [--database-url <url>]"
)


def run_entity_argv(argv: list[str]) -> None:
    """Dispatch las entity <subcommand>. argv excludes 'las entity'."""
    if not argv:
        print("Usage: las entity <subcommand> [options]", file=sys.stderr)
        print("Subcommands:", file=sys.stderr)
        print("  generate          - Delete generated entities and rerun sea-orm-cli", file=sys.stderr)
        print(
            f"  migrate <action>  - Run the migration crate ({', '.join(MIGRATION_ACTIONS)})",
            file=sys.stderr,
        )
        sys.exit(1)

    sub = argv[0].lower()
    args = argv[1:]

    if sub == "generate":
        parsed, rest = parse_project_args(
            args, GENERATE_USAGE, ("database_url", "--database-url", None, None)
        )
        if rest:
            print(f"Error: Unexpected argument: {rest[0]}", file=sys.stderr)
            print(f"Usage: {GENERATE_USAGE}", file=sys.stderr)
            sys.exit(1)
        project_root = parsed["project_root"]
        cfg = load_config_or_exit(project_root, parsed["config_path"])
        sys.exit(run_regenerate(project_root, cfg, database_url=parsed["database_url"]))

    if sub == "migrate":
        parsed, rest = parse_project_args(
            args, MIGRATE_USAGE, ("database_url", "--database-url", None, None)
        )
        if len(rest) != 1:
            print(f"Usage: {MIGRATE_USAGE}", file=sys.stderr)
            sys.exit(1)
        project_root = parsed["project_root"]
        cfg = load_config_or_exit(project_root, parsed["config_path"])
        sys.exit(
            run_migrate(project_root, rest[0], cfg, database_url=parsed["database_url"])
        )

    print(f"Error: Unknown entity subcommand: {sub}", file=sys.stderr)
    sys.exit(1)
