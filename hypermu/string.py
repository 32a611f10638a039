# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'String utilities.'

import re
from typing import Any


def split_camelcase(string:str) -> list[str]:
  '''
  Split a camel-case string into chunks at case and letter-digit boundaries.
  An uppercase run followed by a lowercase letter keeps its last capital with the following chunk:
  "sixHUMPCamel" splits into ["six", "HUMP", "Camel"]; "data9" splits into ["data", "9"].
  '''
  return _camel_boundary_re.split(string)

_camel_boundary_re = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|(?<=[A-Za-z])(?=[0-9])')


def kebab_from_camelcase(string:str) -> str:
  'Convert a camel-case or squish-case string (e.g. "camelCase", "data9") to kebab-case (e.g. "camel-case", "data-9").'
  return '-'.join(split_camelcase(string)).lower()


def kebab_from_identifier(name:str) -> str:
  '''
  Convert a Python identifier used as a keyword argument to a kebab-case name.
  A trailing underscore (used to avoid keywords, e.g. `class_`) is dropped and remaining underscores become hyphens.
  '''
  if name.endswith('_') and name.strip('_'): name = name[:-1]
  return kebab_from_camelcase(name.replace('_', '-'))


def repr_lim(obj:Any, limit=32) -> str:
  'Return a repr of `obj` that is at most `limit` characters long.'
  r = repr(obj)
  if limit > 2 and len(r) > limit:
    q = r[0]
    if q in '\'"': return f'{r[:limit-2]}{q}…'
    else: return f'{r[:limit-1]}…'
  return r


class RawName(str):
  '''
  A `str` subclass marking an attribute name as already in its final form.
  Markup contexts skip name normalization for raw names, allowing names that normalization would otherwise alter.
  '''
