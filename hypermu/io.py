# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Console output helpers for the command line tool. Library code never prints.'

from sys import stderr, stdout
from typing import Any


def outL(*items:Any, sep='', flush=False) -> None:
  "Write items to std out; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stdout, flush=flush)

def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)
