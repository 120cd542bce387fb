class Csv2PydanticError(Exception):
    """
    Base exception for all csv2pydantic errors
    """
    pass


class ConfigError(Csv2PydanticError):
    """
    Raised when run options are missing or invalid
    """
    pass


class HeaderParseError(Csv2PydanticError):
    """
    Raised when the header row cannot be read
    """
    pass


class RecordParseError(Csv2PydanticError):
    """
    Raised when a data row is malformed (quoting, encoding)
    """

    def __init__(self, message: str, row_number: int = None):
        super().__init__(message)
        self.row_number = row_number


class ColumnCountMismatchError(Csv2PydanticError):
    """
    Raised when a data row has a different field count than the header
    """

    def __init__(self, row_number: int, expected: int, actual: int):
        super().__init__(
            f"Row {row_number} has {actual} fields, header has {expected}"
        )
        self.row_number = row_number
        self.expected = expected
        self.actual = actual


class CodeGenerationError(Csv2PydanticError):
    """
    Raised when the assembled model declaration is not valid Python.
    The underlying SyntaxError is attached as __cause__.
    """
    pass


class OutputExistsError(Csv2PydanticError):
    """
    Raised when the output file exists and overwriting was not requested
    """
    pass
