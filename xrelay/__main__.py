"""xrelay entry point."""

import getpass
import logging
import os
import sys

import yaml

from xrelay.cli import build_overrides, parse_args, print_error, print_session_end, print_session_start
from xrelay.composition import create_container
from xrelay.config import Config, load_config
from xrelay.domain import SetupError, UnsupportedPlatform
from xrelay.infrastructure.sockets import unix_sockets_supported
from xrelay.infrastructure.terminal import termios_supported
from xrelay.logging_setup import console_paused, setup_logging_from_env

logger = logging.getLogger("xrelay")

PASSWORD_ENV = "XRELAY_PASSWORD"

EXIT_OK = 0
EXIT_UNSUPPORTED = 1
EXIT_SETUP_FAILED = 2
EXIT_INTERRUPTED = 130


def platform_supported() -> bool:
    """Unix domain sockets and termios are both required."""
    return unix_sockets_supported() and termios_supported()


def resolve_password(cli_password: str | None, config: Config) -> str | None:
    """Password from the command line, the environment, or a prompt.

    No prompt when a key file is configured.
    """
    if cli_password is not None:
        return cli_password
    env_password = os.environ.get(PASSWORD_ENV)
    if env_password is not None:
        return env_password
    if config.ssh.key_filename:
        return None
    return getpass.getpass(f"{config.ssh.username}@{config.ssh.host}'s password: ")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging_from_env(verbose=args.verbose, debug_transport=args.debug, log_file=args.log_file)

    if not platform_supported():
        print_error("Sorry, this platform is not supported.")
        return EXIT_UNSUPPORTED

    try:
        config = load_config(args.config, overrides=build_overrides(args))
    except (ValueError, yaml.YAMLError) as e:
        print_error(f"invalid configuration: {e}")
        return EXIT_SETUP_FAILED

    if not config.ssh.host or not config.ssh.username:
        print_error("usage: xrelay HOST USERNAME [PASSWORD]")
        return EXIT_SETUP_FAILED

    try:
        password = resolve_password(args.password, config)
        container = create_container(config, password)
    except UnsupportedPlatform as e:
        print_error(f"Sorry, this platform is not supported: {e}")
        return EXIT_UNSUPPORTED
    except (EOFError, KeyboardInterrupt):
        return EXIT_INTERRUPTED

    print_session_start(
        config.ssh.host,
        config.ssh.username,
        config.forwarding.current_display(),
        config.forwarding.enabled,
    )

    try:
        ticks = container.client_service.run(while_raw=console_paused)
    except SetupError as e:
        print_error(str(e))
        return EXIT_SETUP_FAILED
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    logger.debug("Relay loop finished ticks=%d", ticks)
    print_session_end(config.ssh.host)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
