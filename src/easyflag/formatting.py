## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

INDENT = '  '
CONTINUATION = '\n    \t'


def unquote_usage(help: str, kind_name: str) -> tuple[str, str]:
    """Extract a back-quoted placeholder name from the help text, e.g. "read `file` from disk".

    Returns (placeholder, help).  Without a back-quoted pair the placeholder is the kind's
    name and the help is left as-is; otherwise the first two backticks are dropped.
    """
    segments = help.split('`')
    if segments and segments[-1] == '':
        segments.pop()
    if len(segments) >= 3:
        return segments[1], help.replace('`', '', 2)
    return kind_name, help


def format_flag(name: str, kind_name: str, help: str) -> str:
    placeholder, help = unquote_usage(help, kind_name)
    head = f"{name} {placeholder}" if placeholder else name
    # Short single-letter switches fit on the same line as their help text.
    sep = '\t' if len(head) <= 4 else CONTINUATION
    return INDENT + head + sep + help.replace('\n', CONTINUATION) + '\n'
