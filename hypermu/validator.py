# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Optional strict validation of markup tag and attribute names.
A `MarkupContext` consults its validator (if any) during construction.
The core does not own any allow-list data; callers supply their own tables.
'''

from typing import Iterable, Mapping, Protocol


class Validator(Protocol):

  def is_valid_tag(self, tag:str) -> bool: ...

  def is_valid_attr(self, tag:str, name:str) -> bool: ...


class TableValidator:
  '''
  A `Validator` backed by explicit tables.
  `attrs_by_tag` maps a tag to the attribute names allowed for it; names in `global_attrs` are allowed on any tag.
  Attribute names starting with `data-` or `aria-` are always allowed.
  '''

  def __init__(self, tags:Iterable[str], attrs_by_tag:Mapping[str,Iterable[str]]|None=None, global_attrs:Iterable[str]=()) -> None:
    self.tags = frozenset(tags)
    self.attrs_by_tag = { tag: frozenset(names) for tag, names in (attrs_by_tag or {}).items() }
    self.global_attrs = frozenset(global_attrs)

  def __repr__(self) -> str: return f'{type(self).__name__}(<{len(self.tags)} tags>)'

  def is_valid_tag(self, tag:str) -> bool:
    return tag in self.tags

  def is_valid_attr(self, tag:str, name:str) -> bool:
    if name in self.global_attrs or name.startswith(('data-', 'aria-')): return True
    return name in self.attrs_by_tag.get(tag, ())
