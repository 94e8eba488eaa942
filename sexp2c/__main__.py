import logging
import sys

from .compiler import transpile
from .errors import CompileError
from .lexer import tokenize

USAGE = """\
Usage: sexp2c [-v] [-t] <source_file>
       sexp2c [-v] [-t] -e '<source>'
  -t  print the token stream instead of compiling
  -v  log each stage to stderr"""


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    # Flags only come before the source argument
    verbose = dump_tokens = False
    while args and args[0] in ('-v', '-t'):
        if args.pop(0) == '-v':
            verbose = True
        else:
            dump_tokens = True

    logging.basicConfig(format='%(name)s: %(message)s')
    logging.getLogger('sexp2c').setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not args:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    if args[0] == '-e':
        if len(args) < 2:
            print("Error: -e requires source argument", file=sys.stderr)
            sys.exit(1)
        source = args[1]
    else:
        with open(args[0], 'r') as f:
            source = f.read()

    try:
        if dump_tokens:
            for tok in tokenize(source):
                print(tok.type, tok.value)
        else:
            print(transpile(source))

    except CompileError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
