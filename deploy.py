"""
Contract Deployment Wrapper
Runs scripts/deploy_contract.py against a chosen network
"""

import os
import sys
import argparse
import subprocess
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deploy the Trust contract")
    parser.add_argument(
        "--network",
        help="Network to deploy to (default: $DEPLOY_NETWORK or alfajores)"
    )
    return parser.parse_args(argv)


def build_env(network=None) -> dict:
    env = os.environ.copy()
    if network:
        env["DEPLOY_NETWORK"] = network
    return env


def main(argv=None):
    args = parse_args(argv)

    print("=" * 70)
    print("Trust Contract Deployment")
    print("=" * 70)
    print()

    # Run from the project root so `scripts` imports and .env loads
    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy_contract"],
        cwd=PROJECT_ROOT,
        env=build_env(args.network)
    )

    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
