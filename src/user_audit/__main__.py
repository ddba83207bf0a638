"""CLI entry point — ``python -m user_audit``.

With no arguments the run uses the built-in defaults (JSONPlaceholder
``/users``, lenient policy, ``user_audit.log`` next to the console).
"""

from __future__ import annotations

import argparse
import sys

from user_audit.engine import AuditEngine
from user_audit.errors import UserAuditError
from user_audit.models import load_config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="user-audit",
        description="Fetch users from the remote API and log email validity.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Optional path to a YAML config file.",
    )
    parser.add_argument(
        "-p", "--policy",
        choices=["lenient", "strict"],
        default=None,
        help=(
            "Error policy: 'lenient' logs failures and exits 0, "
            "'strict' exits non-zero on the first failure. "
            "Overrides settings.policy from the config file."
        ),
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.policy is not None:
        config.settings.policy = args.policy

    try:
        AuditEngine(config).run()
    except UserAuditError:
        # Already logged by the engine.
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
