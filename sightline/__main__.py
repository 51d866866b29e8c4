"""Entry point for sightline package."""

import argparse

from sightline.config import configure_logging, get_config


def main() -> None:
    """Run the fixed demonstration trace."""
    parser = argparse.ArgumentParser(
        description="Sightline - 2D vector math and camera visibility demo",
        prog="sightline",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each visibility decision (DEBUG level)",
    )

    args = parser.parse_args()

    config = get_config()
    for error in config.validate():
        print(f"warning: {error}")
    configure_logging("DEBUG" if args.verbose else None)

    from sightline.demo import run_demo

    run_demo()


if __name__ == "__main__":
    main()
