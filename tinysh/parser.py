import shlex

from tinysh.status import fatal

# space, tab, carriage return, newline, bell
DELIMITERS = " \t\r\n\a"


def split_line(line):
    """
    Split line into tokens on runs of DELIMITERS.
    No quoting, escaping or comments: every other character is literal.
    Returns: list of tokens, [] for a blank line
    """
    try:
        lex = shlex.shlex(line, posix=True)
        lex.whitespace = DELIMITERS
        lex.whitespace_split = True
        lex.quotes = ""
        lex.escape = ""
        lex.commenters = ""
        return list(lex)
    except MemoryError:
        fatal("allocation error")
