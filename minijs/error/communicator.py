from minijs.util import Colors, Span


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="FrontendError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        message = class_name + ": " + before

        # Without the source text, or without a position, there is nothing to quote
        lines = program.splitlines()
        if lines and 1 <= span.start_ln <= len(lines):
            error_lines = lines[
                max(0, span.start_ln - n_before - 1) : span.end_ln + n_after
            ]
            message += "\n" + "\n".join(
                Communicator.format_lines(error_lines, span, n_before, color)
            )

        if after:
            message += "\n" + after
        return message

    @staticmethod
    def format_lines(error_lines, span: Span, n_before: int, color):
        start_line_no = max(1, span.start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the code.
            # See the * in the following example:
            #    *8. var a = 12;
            # -> *9. var b = 15;
            #    10. function f(c, d) {
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            if i < span.start_ln or i > span.end_ln:
                yield f"   {padding}{i}. {line}"

            # First line, do not color before the span
            elif i == span.start_ln:
                final_line = f"-> {padding}{i}. {line[:span.start_col]}"
                if span.multiline:
                    final_line += f"{color}{line[span.start_col:]}{Colors.ENDC}"
                else:
                    final_line += (
                        f"{color}{line[span.start_col:span.end_col]}{Colors.ENDC}"
                    )
                    final_line += line[span.end_col :]
                yield final_line

            # Lines in between the first and last line are colored completely
            elif i < span.end_ln:
                yield f"-> {padding}{i}. {color}{line}{Colors.ENDC}"

            # The last line of a multiline span
            else:
                yield (
                    f"-> {padding}{i}. {color}{line[:span.end_col]}{Colors.ENDC}"
                    + line[span.end_col :]
                )
