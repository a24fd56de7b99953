"""
Terraform Cloud Profile CLI

A command-line utility for keeping several Terraform Cloud accounts and
switching the credentials file terraform reads between them.
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .errors import TerraformProfileError
from .profiles import (
    load_profiles,
    switch_profile,
    import_profile,
    get_current_profile,
    list_profiles,
)
from .utils import ProfilePaths, setup_logging

logger = logging.getLogger(__name__)

def format_profile_list(names):
    """Format profile names for display."""
    output = ["Currently available profiles:"]
    for name in names:
        output.append(f"\t{name}")
    return "\n".join(output)

def handle_switch(args, paths, profiles):
    """Handle the switch command."""
    switch_profile(paths, profiles, args.name)
    print("Switched credentials with the new profile")

def handle_import(args, paths, profiles):
    """Handle the import command."""
    import_profile(paths, profiles, args.name)
    print("The terraform cloud profile was safely registered")

def handle_status(args, paths, profiles):
    """Handle the status command."""
    print(get_current_profile(paths, profiles))

def handle_list(args, paths, profiles):
    """Handle the list command."""
    print(format_profile_list(list_profiles(profiles)))

def build_parser():
    parser = argparse.ArgumentParser(
        prog="terraform-profile",
        description="Select a subcommand to interact with your terraform cloud profile."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Log what is done on stderr (repeat for debug output)")
    parser.add_argument("--home", type=Path, help=argparse.SUPPRESS)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Switch command
    switch_parser = subparsers.add_parser(
        "switch", help="Switch the current terraform cloud profile for another")
    switch_parser.add_argument("name", help="Profile name to switch to")
    switch_parser.set_defaults(func=handle_switch)

    # Import command
    import_parser = subparsers.add_parser(
        "import", help="Import your current unregistered terraform cloud profile")
    import_parser.add_argument("name", help="Name to register the profile under")
    import_parser.set_defaults(func=handle_import)

    # Status command
    status_parser = subparsers.add_parser(
        "status", help="Check which terraform cloud profile is currently used")
    status_parser.set_defaults(func=handle_status)

    # List command
    list_parser = subparsers.add_parser(
        "list", help="List all the different registered terraform cloud profiles")
    list_parser.set_defaults(func=handle_list)

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    setup_logging(args.verbose)

    try:
        paths = ProfilePaths.from_home(args.home)
        profiles = load_profiles(paths.registry_dir)
        args.func(args, paths, profiles)
    except TerraformProfileError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
