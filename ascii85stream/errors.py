class Ascii85Error(ValueError):
    """
    Base class for malformed input detected while encoding or decoding.

    `position` is the 0-based index of the source element that caused the error.
    """

    def __init__(self, message: str, position: int):
        super().__init__(f'{message} (at source position {position})')
        self.position = position


class UpstreamFailure(Ascii85Error):
    """The source sequence itself failed; the original exception is kept as `error` and `__cause__`"""

    def __init__(self, error: BaseException, position: int):
        super().__init__(f'source failed: {error!r}', position)
        self.error = error


class InvalidCharacter(Ascii85Error):
    def __init__(self, character: str, position: int):
        super().__init__(f"invalid character {character!r}, must be between '!' and 'u' or be 'z'", position)
        self.character = character


class MisplacedShorthand(Ascii85Error):
    def __init__(self, position: int):
        super().__init__("'z' must be the first character of a block", position)


class IncompleteGroup(Ascii85Error):
    def __init__(self, position: int):
        super().__init__('final group has a single character, at least 2 are needed to decode a byte', position)


class GroupOverflow(Ascii85Error):
    def __init__(self, value: int, position: int):
        super().__init__(f'group value {value} does not fit in 32 bits', position)
        self.value = value
