# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`node` provides the `Node` class, an immutable tree element for HTML, SVG and CSS documents.

A node has a context, a tag, a tuple of children and a mapping of attributes.
Construction runs each part through the context's pipeline:
`tag = validate_tag(normalize_tag(tag))`, then each flattened child through `normalize_child` and `validate_child`,
then each attribute through `normalize_attr` (which may yield zero or more pairs) and `validate_attr`.

Calling a node extends it: `node(*children, **attrs)` runs the pipeline on the new parts only,
and returns a new node with the new children after the existing ones and the new attributes merged over the existing ones.
'''

from itertools import chain
from types import MappingProxyType
from typing import Any, Iterable, Mapping, NoReturn, Self

from .context import AttrItem, Context, CssContext, DEFAULT_CSS_CONTEXT, DEFAULT_MARKUP_CONTEXT, NOESCAPE_MARKUP_CONTEXT
from .exceptions import ChildTypeError
from .iterable import flatten
from .string import kebab_from_identifier, RawName, repr_lim


NodeAttrs = Mapping[str,Any]

_set_attr = object.__setattr__


class Node:
  '''
  Immutable tree node bound to a `MarkupContext` or `CssContext`.

  Keyword attribute names are normalized by the context (e.g. `fooBar` and `foo_bar` become `foo-bar`).
  Names in the `attrs` mapping are raw: markup contexts use them verbatim.
  Keyword attributes are applied after `attrs`, so they take precedence.

  Accessing an attribute that is not one of the node's own fields adds a class:
  `m('p').fooBar` is equivalent to `m('p', class_='foo-bar')`.
  Use `add_class` for class names that are not identifiers, or to avoid kebab-casing.
  '''

  __slots__ = ('context', 'tag', 'children', 'attrs')

  context:Context
  tag:str
  children:tuple[Any,...]
  attrs:NodeAttrs

  def __init__(self, ctx:Context, tag:str, children:Any=(), /, attrs:NodeAttrs|None=None, **kw_attrs:Any) -> None:
    if not isinstance(ctx, Context): raise TypeError(f'expected a node context; received {ctx!r}')
    if not isinstance(tag, str): raise TypeError(f'tag must be `str`; received {type(tag).__name__}: {tag!r}')
    tag = ctx.validate_tag(ctx.normalize_tag(tag))
    _set_attr(self, 'context', ctx)
    _set_attr(self, 'tag', tag)
    _set_attr(self, 'children', tuple(process_children(ctx, tag, children)))
    _set_attr(self, 'attrs', MappingProxyType(process_attrs(ctx, tag, attrs, kw_attrs)))


  @classmethod
  def assemble(cls, ctx:Context, tag:str, children:Iterable[Any], attrs:NodeAttrs) -> Self:
    '''
    Create a node from parts that have already been through the pipeline.
    Used for extension and for derived trees (scope augmentation, selector flattening).
    The `attrs` mapping is shared if it is already read-only, so callers must not mutate it afterwards.
    '''
    node = object.__new__(cls)
    _set_attr(node, 'context', ctx)
    _set_attr(node, 'tag', tag)
    _set_attr(node, 'children', children if isinstance(children, tuple) else tuple(children))
    _set_attr(node, 'attrs', attrs if isinstance(attrs, MappingProxyType) else MappingProxyType(dict(attrs)))
    return node


  def __call__(self, *children:Any, attrs:NodeAttrs|None=None, **kw_attrs:Any) -> 'Node':
    'Return a new node extended with additional children and attributes.'
    ctx = self.context
    ext_children = self.children
    if children:
      ext_children = ext_children + tuple(process_children(ctx, self.tag, children))
    ext_attrs = self.attrs
    if attrs or kw_attrs:
      ext_attrs = MappingProxyType({**self.attrs, **process_attrs(ctx, self.tag, attrs, kw_attrs)})
    return Node.assemble(ctx, self.tag, ext_children, ext_attrs)


  def __setattr__(self, name:str, val:Any) -> NoReturn:
    raise ValueError(f'{type(self).__name__} is immutable; cannot set {name!r}')

  def __delattr__(self, name:str) -> NoReturn:
    raise ValueError(f'{type(self).__name__} is immutable; cannot delete {name!r}')


  def __getattr__(self, name:str) -> 'Node':
    # Only called when normal lookup fails. Private names and unset slots must fail normally,
    # so that copying, pickling and partially constructed instances behave.
    if name.startswith('_') or name in Node.__slots__: raise AttributeError(name)
    return self.add_class(kebab_from_identifier(name))


  def add_class(self, cl:str) -> 'Node':
    'Return a new node with `cl` appended verbatim to the `class` attribute.'
    if isinstance(self.context, CssContext): raise ChildTypeError('no class override for style nodes.')
    existing = self.attrs.get('class')
    return self(attrs={'class': cl if existing is None else f'{existing} {cl}'})


  def __eq__(self, other:Any) -> bool:
    if not isinstance(other, Node): return NotImplemented
    return (self.context == other.context and self.tag == other.tag and
      self.children == other.children and dict(self.attrs) == dict(other.attrs))

  __hash__ = None # type: ignore[assignment]


  def __repr__(self) -> str:
    words = ''.join(chain(
      (f' {k}={repr_lim(v)}' for k, v in self.attrs.items()),
      (f' {c.tag}' if isinstance(c, Node) else f' {repr_lim(c)}' for c in self.children)))
    kind = 'css' if isinstance(self.context, CssContext) else 'mu'
    return f'{type(self).__name__}<{kind}:{self.tag}:{words}>'


  def __str__(self) -> str:
    return self.render()


  def render(self) -> str:
    'Render the node in its own context.'
    from .render import render
    return render(self)


def process_children(ctx:Context, tag:str, children:Any) -> list[Any]:
  'Flatten `children`, then normalize and validate each child.'
  return [ctx.validate_child(tag, ctx.normalize_child(tag, c)) for c in flatten(children)]


def process_attrs(ctx:Context, tag:str, attrs:NodeAttrs|None, kw_attrs:Mapping[str,Any]) -> dict[str,Any]:
  '''
  Normalize and validate raw `attrs` followed by keyword attributes.
  A single attribute may normalize to several; later duplicate names overwrite earlier ones.
  '''
  raw_items:Iterable[AttrItem] = ()
  if attrs:
    for k in attrs:
      if not isinstance(k, str): raise TypeError(f'attribute name must be `str`; received {type(k).__name__}: {k!r}')
    raw_items = ((RawName(k), v) for k, v in attrs.items())
  processed:dict[str,Any] = {}
  for name, val in chain(raw_items, kw_attrs.items()):
    for norm_name, norm_val in ctx.normalize_attr(tag, name, val):
      valid_name, valid_val = ctx.validate_attr(tag, norm_name, norm_val)
      processed[valid_name] = valid_val
  return processed


def m(tag:str, /, *children:Any, attrs:NodeAttrs|None=None, **kw_attrs:Any) -> Node:
  'Create an HTML or SVG node.'
  return Node(DEFAULT_MARKUP_CONTEXT, tag, children, attrs=attrs, **kw_attrs)


def m_noescape(tag:str, /, *children:Any, attrs:NodeAttrs|None=None, **kw_attrs:Any) -> Node:
  '''
  Create an HTML or SVG node whose text children are rendered without escaping, e.g. for `script` or `style` contents.
  Nested nodes are escaped according to their own contexts.
  '''
  return Node(NOESCAPE_MARKUP_CONTEXT, tag, children, attrs=attrs, **kw_attrs)


def css(tag:str, /, *children:Any, attrs:NodeAttrs|None=None, **kw_attrs:Any) -> Node:
  'Create a CSS rule node. The tag is a selector or at-rule; the attributes are declarations; children are nested rules.'
  return Node(DEFAULT_CSS_CONTEXT, tag, children, attrs=attrs, **kw_attrs)
