## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# easyflag — A simple command-line flag parser, with typed slots and Go-style usage text.
#

import logging
from typing import Any, Iterable, Iterator
from dataclasses import dataclass, field

from .binding import Binding
from .errors import FlagNameError, FlagArgumentError, FlagParseError, FlagValueError
from .formatting import format_flag


log = logging.getLogger(__name__)


@dataclass
class Flag:
    name: str                     # alias text as declared, e.g. "-h, --help"
    help: str
    var: Binding
    aliases: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        self.aliases = tuple(a.strip() for a in self.name.split(',') if a)

    def matches(self, token: str) -> bool:
        return token in self.aliases


class FlagSet:
    """Ordered set of declared flags.  Order decides both match priority and listing order.

    Example:
        help, level = Bool(False), U8(1)
        flags = FlagSet("app").add("-h, --help", help, "Prints help message.") \\
                              .add("-l, --level", level, "compression `level` to use")
        flags.parse(sys.argv[1:])
    """

    def __init__(self, name: str):
        self._name = name
        self._flags: list[Flag] = []

    def add(self, name: str, var: Any, help: str) -> "FlagSet":
        """Declare a flag bound to the slot `var`; raises FlagTypeError if `var` is not a slot."""
        self._flags.append(Flag(name, help, Binding(var)))
        log.debug("Declared flag `%s` as %s in `%s`.", name, self._flags[-1].var.kind.name, self._name)
        return self

    def lookup(self, token: str) -> Flag | None:
        return next((f for f in self._flags if f.matches(token)), None)

    def parse(self, args: Iterable[str]) -> None:
        """Consume `args` left to right, updating bound slots.  Raises on the first bad token;
        slots already updated by earlier tokens keep their new values.
        """
        args_iter = iter(args)
        for item in args_iter:
            if (flag := self.lookup(item)) is None:
                raise FlagNameError(f"flag {item} provided but not defined", token=item)

            if flag.var.is_switch:
                flag.var.enable()
                log.debug("Flag `%s` switched on by `%s`.", flag.name, item)
                continue

            if (value := next(args_iter, None)) is None:
                raise FlagArgumentError(f"flag needs an argument: {flag.name}", flag=flag.name, token=item)
            try:
                flag.var.assign(value)
            except FlagValueError as exc:
                raise FlagParseError(f"parse flag {flag.name} failed: {exc}", flag=flag.name, token=value) from exc
            log.debug("Flag `%s` set to %r by `%s`.", flag.name, flag.var.value, item)

    def name(self) -> str:
        return self._name

    @property
    def flags(self) -> tuple[Flag, ...]:
        return tuple(self._flags)

    def usage(self) -> str:
        return f"Usage of {self._name}:\n" + self.defaults()

    def defaults(self) -> str:
        return ''.join(format_flag(f.name, f.var.kind_name(), f.help) for f in self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags)

    def __repr__(self):
        return f"FlagSet({self._name!r}, flags={[f.name for f in self._flags]})"
