# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised while building and rendering trees.
Each class also subclasses the builtin exception it most resembles, so that callers can catch either.
'''


class MarkupError(Exception):
  'Base class for all errors raised by hypermu.'


class TagError(MarkupError, ValueError):
  'Raised for an empty or disallowed tag, or when a void tag is given children.'


class AttrError(MarkupError, ValueError):
  '''
  Raised when an attribute name or value fails validation.
  Not a subclass of the builtin `AttributeError`,
  which `getattr` and `hasattr` catch during attribute lookup.
  '''


class ChildTypeError(MarkupError, TypeError):
  'Raised when a child is not allowed for its parent, or for class shorthand applied to a style node.'


class InvariantViolation(MarkupError, AssertionError):
  'Raised when a node is rendered in a context other than its own. Correct construction should never trigger this.'
