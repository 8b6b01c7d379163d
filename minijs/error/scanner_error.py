from dataclasses import dataclass

from minijs.error.error import FrontendError, FrontendException


class ScannerException(FrontendException):
    pass


class ScannerError(FrontendError):
    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="ScannerError", after=after)


@dataclass
class UnexpectedCharacterError(ScannerError):
    char: str

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected character {self.char!r} on {self.position_str}."
        )
