from typing import List, Optional, Union


class _MissingValue:
    """Marker for a flag given as the last token, with nothing after it."""

    def __bool__(self):
        return False

    def __repr__(self):
        return "MISSING_VALUE"


MISSING_VALUE = _MissingValue()

FLAG_PREFIX = "--"


def get_arg(args: List[str], name: str) -> Union[str, None, _MissingValue]:
    """
    Get a single command line argument value.

    Returns None when the flag is absent and MISSING_VALUE when it is the
    last token. Both are falsy.
    """
    try:
        i = args.index(name)
    except ValueError:
        return None
    if i + 1 >= len(args):
        return MISSING_VALUE
    return args[i + 1]


def get_all_args(args: List[str], name: str) -> List[str]:
    """Get the values of every occurrence of a repeatable flag."""
    result: List[str] = []
    for i, token in enumerate(args):
        if token != name:
            continue
        value: Optional[str] = args[i + 1] if i + 1 < len(args) else None
        if value and not value.startswith(FLAG_PREFIX):
            result.append(value)
    return result
