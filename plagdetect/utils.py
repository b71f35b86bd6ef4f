# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Random utils.
from contextlib import contextmanager
from termtables import to_string
from threading import local

class StructuredPrinter:
    '''Prints indented progress lines when enabled. The indentation is
    kept per thread so concurrent detections don't disturb each other.
    '''
    def __init__(self, enabled):
        self.enabled = enabled
        self.state = local()

    @property
    def indent(self):
        return getattr(self.state, 'indent', 0)

    @indent.setter
    def indent(self, value):
        self.state.indent = value

    def print_indented(self, text):
        if self.enabled:
            print(' ' * self.indent + text)

    def header(self, name, fmt = None, args = None):
        if fmt is not None:
            name = '%s %s' % (name, fmt % args)
        self.print_indented('* %s' % name)
        self.indent += 2

    def print(self, fmt, args = None):
        s = fmt % args if args is not None else str(fmt)
        self.print_indented(s)

    def leave(self):
        if self.indent < 2:
            raise ValueError('leave() without matching header()!')
        self.indent -= 2

    @contextmanager
    def section(self, name, fmt = None, args = None):
        self.header(name, fmt, args)
        try:
            yield self
        finally:
            self.leave()

SP = StructuredPrinter(False)

def load_document(path, encoding = 'utf-8'):
    with open(path, 'rt', encoding = encoding) as f:
        text = f.read()
    SP.print('Read %d characters from %s.' % (len(text), path))
    return text

def shorten(text, n):
    '''Cuts text to at most n characters, none if n is negative, and puts the result on a
    single line.
    '''
    return ' '.join(text[:max(n, 0)].splitlines())

def term_table_string(row_fmt, rows, header, alignment):
    def format_col(fmt, col):
        if callable(fmt):
            return fmt(col)
        return fmt % col
    rows = [[format_col(*e) for e in zip(row_fmt, row)] for row in rows]
    return to_string(rows,
                     header = header,
                     padding = (0, 1),
                     alignment = alignment,
                     style = "            -- ")

def print_term_table(row_fmt, rows, header, alignment):
    s = term_table_string(row_fmt, rows, header, alignment)
    m = len(s.splitlines()[1]) - 2
    print(' ' + '=' * m)
    print(s)
    print(' ' + '=' * m)
