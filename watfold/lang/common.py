import os


class SourceLocation:
    """A location that refers to a position in a source text"""

    __slots__ = ["filename", "row", "col", "length", "source"]

    def __init__(self, filename, row, col, ln, source=None):
        self.filename = filename
        self.row = row
        self.col = col
        self.length = ln
        self.source = source

    def __repr__(self):
        return f"({self.filename}, {self.row}, {self.col}, {self.length})"

    def get_source_line(self):
        """Return the source line indicated by this location"""
        if not self.source and self.filename:
            if os.path.exists(self.filename):
                with open(self.filename, "r") as f:
                    self.source = f.read()

        if self.source:
            lines = self.source.split("\n")
            return lines[self.row - 1]
        else:
            return "Could not load source"

    def print_message(self, message: str, lines=None, file=None):
        """Print a message at this location in the given source lines"""
        if lines is None:
            if self.source is None:
                print(message, file=file)
                return
            lines = self.source.split("\n")

        if self.filename:
            print('File : "{}"'.format(self.filename), file=file)

        print_message(
            lines, self.row, self.col, self.length, message, file=file
        )


def location_at(text: str, index: int, length=1, filename=None):
    """Create a location for the character at index in text.

    Rows and columns are one based and count characters, not bytes.
    """
    row = text.count("\n", 0, index) + 1
    line_start = text.rfind("\n", 0, index) + 1
    col = index - line_start + 1
    return SourceLocation(filename, row, col, length, source=text)


def print_message(
    lines, row: int, col: int, length: int, message: str, file=None
):
    """Render a message nicely embedded in surrounding source"""
    prerow = max(row - 2, 1)
    afterrow = min(row + 3, len(lines))

    for r in range(prerow, afterrow + 1):
        txt = lines[r - 1]
        print("{:5} :{}".format(r, txt), file=file)

        # Point at the offending column:
        if r == row:
            base_txt = "      :"
            if length < 1:
                length = 1
            marker = "^" * length
            indent1_txt = base_txt + " " * (col - 1)
            indent2_txt = indent1_txt + " " * (length // 2)
            print(f"{indent1_txt}{marker}", file=file)
            print(f"{indent2_txt}|", file=file)
            print(f"{indent2_txt}+---- {message}", file=file)
