"""Application exceptions.

Calculation kernels never raise; these cover packaging-level problems such as
a corrupted reference data file.
"""


class CalcEngineError(Exception):
    """Base exception for the application"""

    pass


class DataValidationError(CalcEngineError):
    """A bundled data file does not have the expected shape"""

    pass
