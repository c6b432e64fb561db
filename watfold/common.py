"""
   Error handling routines
   Diagnostic utils
"""


from .lang.common import SourceLocation


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class CompilerError(Exception):
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        if loc:
            assert isinstance(loc, SourceLocation), \
                   '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '{}("{}")'.format(type(self).__name__, self.msg)

    def __str__(self):
        if self.loc:
            return 'line {}, column {}: {}'.format(
                self.loc.row, self.loc.col, self.msg)
        return self.msg

    def render(self, lines):
        """ Render this error in some lines of context """
        self.loc.print_message('Error: {0}'.format(self.msg), lines=lines)

    def print(self, file=None):
        """ Print the error inside some nice context """
        if self.loc:
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class ParseError(CompilerError):
    """ Raised when text is not a well formed tagged form """
    pass


class MissingOpenParen(ParseError):
    pass


class MissingLabel(ParseError):
    pass


class UnbalancedInput(ParseError):
    """ A parenthesized group was never closed """
    pass


class TrailingInput(ParseError):
    pass


class ReparseFailure(CompilerError):
    """ An inlined function call could not be parsed during unfolding.

    Besides the message and location, this error carries:

    - cause: the error raised while parsing the call text
    - trail: labels of the enclosing forms, outermost first
    - index: position of the failing entry in the innermost prefix
    """
    def __init__(self, msg, loc=None, cause=None, trail=(), index=None):
        super().__init__(msg, loc)
        self.cause = cause
        self.trail = tuple(trail)
        self.index = index
