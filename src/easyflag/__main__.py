## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# easyflag — Example program: declares a couple of flags and reports what was parsed.
#

import sys
import logging
from dataclasses import dataclass

import click

from .types import Bool, String
from .errors import FlagError
from .flagset import FlagSet


@dataclass(frozen=True)
class CliConfig:
    prog: str
    debug: bool


def build_flagset(prog: str, help: Bool, my_flag: String) -> FlagSet:
    return FlagSet(prog) \
        .add("-h, --help", help, "Prints help message.") \
        .add("-m, --my-flag", my_flag, "Help message for my_flag with string `value`")


def run(config: CliConfig, tokens: list[str]) -> int:
    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)

    help, my_flag = Bool(False), String("default value")
    flags = build_flagset(config.prog, help, my_flag)

    try:
        flags.parse(tokens)
    except FlagError as exc:
        click.echo(flags.defaults())
        click.echo(f"error: {exc}", err=True)
        return 1

    if help.value:
        click.echo(flags.usage())
        return 0

    click.echo(f"my_flag flag value: {my_flag.value}")
    return 0


# No click help option: `-h` and `--help` belong to the demo's own flag set.
@click.command(context_settings={'ignore_unknown_options': True, 'allow_interspersed_args': False, 'help_option_names': []})
@click.option('--debug', is_flag=True, envvar='EASYFLAG_DEBUG', help='Log flag declarations and dispatch to stderr.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, debug: bool, tokens: tuple[str, ...]) -> None:
    config = CliConfig(prog=ctx.info_name or 'easyflag', debug=debug)
    ctx.exit(run(config, list(tokens)))


def main(argv: list[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    # Only a leading run of `--debug` is ours; everything after goes to the flag set untouched,
    # including later `--debug` and `--` tokens which may be flag values.
    lead = next((i for i, t in enumerate(args) if t != '--debug'), len(args))
    cli.main(args=[*args[:lead], '--', *args[lead:]], prog_name='easyflag')


if __name__ == "__main__":
    main()
