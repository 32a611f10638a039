# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Node contexts.

Every node carries a context, which fully determines how the node's tag, attributes and children are
normalized (converted to a canonical form) and validated (checked for invariants) at construction,
and how they are escaped when the node is rendered.

There are exactly two kinds of context: `MarkupContext` for HTML and SVG, and `CssContext` for style rules.
Both provide the same set of hooks:
* normalize_tag, validate_tag;
* normalize_attr (returning zero or more attribute pairs), validate_attr;
* normalize_child, validate_child;
* tag_escapes, attr_name_escapes, attr_val_escapes, child_escapes.
'''

from dataclasses import dataclass
from math import isnan
from typing import Any, Iterable

from .escape import attr_val_escapes, EscapeTable, html_escapes, no_escapes
from .exceptions import AttrError, ChildTypeError, TagError
from .semantics import boolean_attrs, svg_camel_attrs_by_lower, svg_digit_attrs, void_tags
from .string import kebab_from_camelcase, kebab_from_identifier, RawName, repr_lim
from .validator import Validator


AttrItem = tuple[str,Any]


@dataclass(frozen=True)
class MarkupContext:
  'Context for HTML and SVG nodes.'
  allow_nan:bool = False # Allow float NaN attribute values.
  noescape:bool = False # Do not escape the text children of nodes in this context. Nested nodes escape according to their own context.
  validator:Validator|None = None # Optional strict validation of tag and attribute names.

  def is_void(self, tag:str) -> bool:
    return tag in void_tags


  def normalize_tag(self, tag:str) -> str:
    return tag.strip()

  def validate_tag(self, tag:str) -> str:
    if not tag: raise TagError('tag cannot be empty.')
    if self.validator is not None and not self.validator.is_valid_tag(tag):
      raise TagError(f'invalid tag: {self.stringify(tag)}')
    return tag


  def normalize_attr(self, tag:str, name:str, val:Any) -> Iterable[AttrItem]:
    '''
    Keyword names are kebab-cased, except for the SVG camelCase names, which are matched case-insensitively.
    Raw names are passed through untouched.
    '''
    if isinstance(name, RawName): return ((str(name), val),)
    lower = name.lower()
    if camel := svg_camel_attrs_by_lower.get(lower): return ((camel, val),)
    if lower in svg_digit_attrs: return ((lower, val),)
    return ((kebab_from_identifier(name), val),)

  def validate_attr(self, tag:str, name:str, val:Any) -> AttrItem:
    if not self.allow_nan and isinstance(val, float) and isnan(val):
      raise AttrError(f'NaN values are not allowed for markup nodes: {self.stringify(tag, name, val)}')
    if any(c.isspace() for c in name):
      raise AttrError(f'whitespace is not allowed in markup attribute names: {self.stringify(tag, name, val)}')
    if name in boolean_attrs and not isinstance(val, bool):
      raise AttrError(f'boolean attribute requires a `bool` value: {self.stringify(tag, name, val)}')
    if self.validator is not None and not self.validator.is_valid_attr(tag, name):
      raise AttrError(f'invalid attribute: {self.stringify(tag, name, val)}')
    return (name, val)


  def normalize_child(self, tag:str, child:Any) -> Any:
    return child

  def validate_child(self, tag:str, child:Any) -> Any:
    if self.is_void(tag):
      raise TagError(f'void tags are not allowed to have children: {self.stringify(tag)}; child: {repr_lim(child)}')
    return child


  @property
  def tag_escapes(self) -> EscapeTable: return html_escapes

  @property
  def attr_name_escapes(self) -> EscapeTable: return html_escapes

  @property
  def attr_val_escapes(self) -> EscapeTable: return attr_val_escapes

  @property
  def child_escapes(self) -> EscapeTable: return no_escapes if self.noescape else html_escapes


  def stringify(self, tag:str, name:str|None=None, val:Any=None) -> str:
    'Summarize a tag and optional attribute for error messages.'
    attr = '' if name is None else f' {name}={repr_lim(val)}'
    end = ' />' if self.is_void(tag) else '>'
    return f'<{tag}{attr}{end}'



@dataclass(frozen=True)
class CssContext:
  'Context for CSS rule nodes, where the tag is a selector or at-rule and the attributes are declarations.'
  allow_nan:bool = False # Allow float NaN declaration values.

  def normalize_tag(self, tag:str) -> str:
    return tag.strip()

  def validate_tag(self, tag:str) -> str:
    if not tag: raise TagError('tag cannot be empty.')
    return tag


  def normalize_attr(self, tag:str, name:str, val:Any) -> Iterable[AttrItem]:
    '''
    CSS property names are always kebab-cased, regardless of the tag.
    A leading capital marks a vendor prefix: `WebkitTransition` becomes `-webkit-transition`.
    '''
    kebab = kebab_from_camelcase(str(name)) if isinstance(name, RawName) else kebab_from_identifier(name)
    if name[:1].isupper(): kebab = '-' + kebab
    return ((kebab, val),)

  def validate_attr(self, tag:str, name:str, val:Any) -> AttrItem:
    if val is None:
      raise AttrError(f'CSS attribute value may not be `None`: {self.stringify(tag, name, val)}')
    if isinstance(val, str) and not val:
      raise AttrError(f'CSS attribute value may not be the empty string: {self.stringify(tag, name, val)}')
    if not self.allow_nan and isinstance(val, float) and isnan(val):
      raise AttrError(f'NaN values are not allowed for CSS nodes: {self.stringify(tag, name, val)}')
    return (name, val)


  def normalize_child(self, tag:str, child:Any) -> Any:
    return child

  def validate_child(self, tag:str, child:Any) -> Any:
    from .node import Node
    if not (isinstance(child, Node) and isinstance(child.context, CssContext)):
      raise ChildTypeError(f'CSS nodes may only have CSS node children; {tag!r} received {type(child).__name__}: {repr_lim(child)}')
    return child


  # CSS text is never escaped; callers are responsible for valid selectors and values.

  @property
  def tag_escapes(self) -> EscapeTable: return no_escapes

  @property
  def attr_name_escapes(self) -> EscapeTable: return no_escapes

  @property
  def attr_val_escapes(self) -> EscapeTable: return no_escapes

  @property
  def child_escapes(self) -> EscapeTable: return no_escapes


  def stringify(self, tag:str, name:str|None=None, val:Any=None) -> str:
    'Summarize a rule and optional declaration for error messages.'
    if name is None: return f'{tag} {{}}'
    return f'{tag} {{ {name}: {repr_lim(val)}; }}'


Context = MarkupContext | CssContext

DEFAULT_MARKUP_CONTEXT = MarkupContext()
NOESCAPE_MARKUP_CONTEXT = MarkupContext(noescape=True)
DEFAULT_CSS_CONTEXT = CssContext()


def is_at_rule(tag:str) -> bool:
  'At-rules (e.g. "@media ...") nest their child rules; ordinary selectors are flattened into descendant selectors.'
  return tag.startswith('@')
