from dataclasses import dataclass

from minijs.error.communicator import Communicator
from minijs.util import Span


@dataclass
class FrontendError:
    program: str
    span: Span

    def create_error(
        self, before: str = "", after: str = "", class_name="FrontendError"
    ) -> str:
        return Communicator.create_message(
            self.program, self.span, class_name, before, after
        )

    @property
    def position_str(self) -> str:
        if self.span.start_ln < 1:
            return "an unknown position"
        return f"{self.span.lines_str} column {self.span.start_col}"


# Python exceptions to differentiate the stage in which errors are thrown
class FrontendException(Exception):
    def __init__(self, error: FrontendError) -> None:
        super().__init__(str(error))
        self.error = error
