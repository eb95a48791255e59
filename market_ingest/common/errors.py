"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for pipeline failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class ContractError(PipelineError):
    """Raised when an existing output no longer matches the document contract."""

    error_code = "CONTRACT_ERROR"


class StageError(PipelineError):
    """Raised for stage failures that should halt in strict mode."""

    error_code = "STAGE_ERROR"


class RecordError(PipelineError):
    """Raised when a single CSV row cannot be turned into a record."""

    error_code = "RECORD_ERROR"


class RowTooShortError(RecordError):
    error_code = "ROW_TOO_SHORT"

    def __init__(self, field_name: str, index: int, row_length: int) -> None:
        super().__init__(
            f"Column {field_name!r} is at index {index} but row has {row_length} cells"
        )
        self.field_name = field_name
        self.index = index
        self.row_length = row_length


class MalformedNumericError(RecordError):
    error_code = "MALFORMED_NUMERIC"

    def __init__(self, field_name: str, value: str) -> None:
        super().__init__(f"Cannot parse {field_name} value {value!r} as a number")
        self.field_name = field_name
        self.value = value


class MissingIdentityFieldError(RecordError):
    error_code = "MISSING_IDENTITY_FIELD"

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Identity field {field_name!r} is missing")
        self.field_name = field_name


class MalformedEncodingError(RecordError):
    error_code = "MALFORMED_ENCODING"

    def __init__(self, line_number: int, encoding: str, reason: str) -> None:
        super().__init__(f"Line {line_number} is not valid {encoding}: {reason}")
        self.line_number = line_number
        self.encoding = encoding
