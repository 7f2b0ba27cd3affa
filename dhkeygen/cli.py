"""
create-private-key - Generate a Diffie-Hellman private key and its public key.

Handles:
1. Group / custom parameter selection from the command line
2. Parameter validation (size, parity, generator range)
3. Private key sampling from OS entropy
4. key=value output on stdout, "Error: ..." on stderr
"""

import argparse
import logging
import sys
from typing import List, Optional

from dhkeygen import config
from dhkeygen.common.models import OutputFormat
from dhkeygen.common.utils import ParseError, render_report
from dhkeygen.crypto.dh import RandomSource, generate_keypair
from dhkeygen.crypto.groups import DEFAULT_GROUP, GROUPS
from dhkeygen.crypto.params import InvalidParameter, resolve_parameters

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="create-private-key",
        description=(
            "Generate a Diffie-Hellman private key (and matching public key) "
            "for a chosen group. Custom primes are not checked for primality."
        ),
    )
    parser.add_argument(
        "--group",
        choices=sorted(GROUPS),
        default=DEFAULT_GROUP,
        help=f"Named group to base parameters on, ignored when --prime is given (default: {DEFAULT_GROUP})"
    )
    parser.add_argument(
        "--prime",
        help="Prime modulus in decimal or hex (hex must start with 0x)"
    )
    parser.add_argument(
        "--generator",
        help="Generator in decimal or hex (default: the group generator)"
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.HEX.value,
        help="Output format for the private key (default: hex)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress to stderr (level also settable with DHKEYGEN_LOG_LEVEL)"
    )
    return parser


def run(args: argparse.Namespace, rng: Optional[RandomSource] = None) -> List[str]:
    """
    Resolve parameters, generate a key pair and render the output lines.

    Nothing is printed here, so a failure leaves stdout untouched.

    Raises:
        ParseError, InvalidParameter
    """
    params = resolve_parameters(args.group, args.prime, args.generator)
    logger.info(
        "Using %s parameters: %d-bit prime, generator %d",
        params.group or "custom", params.prime_bits, params.generator,
    )
    keypair = generate_keypair(params, rng)
    return render_report(keypair, OutputFormat(args.output_format))


def main(argv: Optional[List[str]] = None, rng: Optional[RandomSource] = None) -> int:
    """Entry point for create-private-key. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = config.load_settings()
    except config.ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else settings.log_level,
        format='%(asctime)s [KEYGEN] %(message)s',
        stream=sys.stderr,
        force=True,
    )

    try:
        lines = run(args, rng)
    except (ParseError, InvalidParameter) as e:
        logger.debug("Rejected input: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
