from typing import Optional

from asnzone import ExitCode


class ConversionError(Exception):
    """ Fatal fault that invalidates the whole conversion run """
    exit_code = ExitCode.INPUT_FAILURE

    def __init__(self,
                 line_number: int,
                 description: str = "",
                 line: Optional[str] = None):
        """ Conversion error

        :param line_number: 1-based number of the offending input line
        :param description: what is wrong with the line, may be empty
        :param line: raw content of the line, if known
        """
        self.line_number = line_number
        self.description = description
        self.line = line
        message = f"ERROR on line {line_number} in input data"
        if description:
            message += f": {description}"
        super().__init__(message)


class MalformedLineError(ConversionError):
    """ Line has none of the recognized shapes """

    def __init__(self, line_number: int, line: str):
        super().__init__(line_number, f'"{line}" is not a valid entry', line)


class InvalidAddressError(ConversionError):
    """ Address-shaped token is not a real address """


class InvalidPrefixError(ConversionError):
    """ Prefix length is outside of the range allowed for the family """


class IntegrityError(ConversionError):
    """ Computed reverse label is not a valid hex digit """
    exit_code = ExitCode.INTEGRITY_FAILURE
