# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Iteration utilities for node construction.
'''

from collections.abc import Iterator
from typing import Any


flattened_types = (list, tuple, Iterator) # `range`, `str`, dicts and sets are not iterators, so they are scalars.


def flatten(val:Any) -> list[Any]:
  '''
  Recursively flatten lists, tuples and iterators (generators, `map`, `filter`, etc.) into a single list.
  Any other value, including a `range`, becomes a single-element list.
  Iterators are consumed eagerly, exactly once.
  '''
  return list(iter_flat(val))


def iter_flat(val:Any) -> Iterator[Any]:
  if isinstance(val, flattened_types):
    for el in val:
      yield from iter_flat(el)
  else:
    yield val
