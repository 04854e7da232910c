import codecs
import sys


# Lines of text prefixed with right aligned line numbers, e.g.
#  9 | foo
# 10 | bar
# lines: list of string
# return: list of string
def number_lines(lines):
    width = len(str(len(lines)))
    return ['{num:>{width}} | {line}'.format(num=i + 1, width=width, line=line) for i, line in enumerate(lines)]


def read_file(path, encoding='utf-8'):
    with codecs.open(path, encoding=encoding) as f:
        return f.read()


# Print contents of a file, optionally with line numbers.
# path: string
# numbered: bool
# out: text stream
def print_file(path, numbered=False, out=None):
    out = out if out is not None else sys.stdout
    contents = read_file(path)
    if numbered:
        for line in number_lines(contents.splitlines()):
            print(line, file=out)
    else:
        print(contents, file=out)


__all__ = ["number_lines", "read_file", "print_file"]
