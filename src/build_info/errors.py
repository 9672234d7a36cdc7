# src/build_info/errors.py


class BuildInfoParseError(ValueError):
    """A legacy `Key: value` report contained a line with no separator."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"invalid BuildInfo input, field '{field}' is not valid")
