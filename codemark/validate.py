"""Validation of marker identifiers."""


class InvalidIdentError(ValueError):
    """Raised when an identifier does not follow the domain:resource:option form."""


def validate_ident(ident: str) -> None:
    """Check that ``ident`` has three colon separated, well terminated segments."""
    if ident.startswith("+"):
        raise InvalidIdentError(
            "an identifier should not start with a plus. the plus is just like "
            f"the `var` keyword in a regular programming language: {ident}"
        )
    colons = ident.count(":")
    if colons < 2:
        raise InvalidIdentError(f"expected two colons in `{ident}` but got {colons}")
    for segment in ident.split(":"):
        last = segment[-1:] or ""
        if not (last.isalpha() or last.isdecimal()):
            raise InvalidIdentError(
                f"identifier cannot end with an underscore `_` or dot `.`: {segment} in {ident}"
            )