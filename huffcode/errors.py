class HuffmanError(Exception):
    """Base class for every error raised by huffcode."""


class EmptyInputError(HuffmanError, ValueError):
    pass


class CharacterRangeError(HuffmanError, ValueError):
    pass


class MissingCodeError(HuffmanError, KeyError):
    def __str__(self):
        # KeyError repr()s its argument
        return str(self.args[0]) if self.args else ""


class MalformedBitstringError(HuffmanError, ValueError):
    pass


class IOReadError(HuffmanError, OSError):
    pass


class IOWriteError(HuffmanError, OSError):
    pass
