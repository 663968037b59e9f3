"""Values compared by their attributes instead of an identity."""


class ValueObject:
    """
    Mixin for frozen dataclasses that model a value.

    Equality and hashing come from the dataclass; this adds a flat form for
    serialization.
    """

    def to_primitive(self) -> object:
        """Single-field values collapse to that field; others become a dict."""
        values = dict(self.__dict__)
        if len(values) != 1:
            return values
        (value,) = values.values()
        return value if isinstance(value, int | str | bool) else str(value)
