"""Conversion of option mappings into terraform command-line flags."""

from typing import Any


def normalize_arg(opt: str) -> str:
    """Normalize an option name into a flag.

    Only the first underscore is turned into a hyphen, so ``vars_file``
    becomes ``-vars-file`` and ``a_b_c`` becomes ``-a-b_c``.

    Parameters
    ----------
    opt : str
        Option name to normalize.

    Returns
    -------
    str
        Flag with a leading hyphen.
    """
    return "-" + opt.replace("_", "-", 1)


def construct_opt_string(opts: dict[str, Any] | None, no_color: bool = False) -> str:
    """Build a string of CLI options from a mapping.

    Every token is prefixed with a single space so the result can be
    appended directly to a subcommand name.

    Parameters
    ----------
    opts : dict[str, Any] or None
        Option names mapped to values. ``var`` holds a nested mapping,
        booleans toggle bare flags, lists and tuples repeat a flag.
    no_color : bool, optional
        Append ``-no-color`` after all other options, by default False.

    Returns
    -------
    str
        Options string, empty when there is nothing to emit.

    Examples
    --------
    >>> construct_opt_string({
    ...     "state": "state.tfstate",
    ...     "var": {"foo": "bar", "bah": "boo"},
    ...     "vars_file": ["x.tfvars", "y.tfvars"],
    ... })
    " -state=state.tfstate -var 'foo=bar' -var 'bah=boo' -vars-file=x.tfvars -vars-file=y.tfvars"
    """
    parts = []

    for option, value in (opts or {}).items():
        if option == "var":
            for key, var_value in value.items():
                parts.append(f" -var '{key}={var_value}'")
        elif isinstance(value, bool):
            if value:
                parts.append(f" -{option}")
        elif isinstance(value, (list, tuple)):
            for item in value:
                parts.append(f" {normalize_arg(option)}={item}")
        else:
            parts.append(f" {normalize_arg(option)}={value}")

    if no_color:
        parts.append(" -no-color")

    return "".join(parts)
