# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Scoped styles.

A `Style` is created from CSS rule nodes and draws a unique id.
Each rule that has declarations gets its selector suffixed with the attribute selector `[v-style<id>]`.
Applying the style to a markup node adds the valueless scope marker attribute `v-style<id>` to the node and all of its
descendants, producing a `Styled` node.
`Styled` nodes act as cascade barriers: applying an outer style never reaches inside an already styled subtree.
'''

from itertools import count
from threading import Lock
from typing import Any, NoReturn

from .context import CssContext, is_at_rule, MarkupContext
from .exceptions import ChildTypeError
from .iterable import flatten
from .node import Node, NodeAttrs
from .string import kebab_from_identifier, repr_lim


_set_attr = object.__setattr__


class StyleIds:
  'Generator of unique style ids, safe to share between threads.'

  def __init__(self, start:int=1) -> None:
    self._counter = count(start)
    self._lock = Lock()

  def next_id(self) -> int:
    with self._lock:
      return next(self._counter)


DEFAULT_STYLE_IDS = StyleIds()


def scope_attr_name(id:int) -> str:
  'The marker attribute added to styled markup nodes.'
  return f'v-style{id}'


class Style:
  '''
  A set of CSS rules scoped to the markup nodes that the style is applied to.
  Ids come from `ids` if provided, otherwise from the process-wide `DEFAULT_STYLE_IDS`.
  The original rule nodes are not modified.
  '''

  __slots__ = ('id', 'rules')

  id:int
  rules:tuple[Node,...]

  def __init__(self, *rules:Any, ids:StyleIds|None=None) -> None:
    rule_nodes = flatten(rules)
    for rule in rule_nodes:
      if not (isinstance(rule, Node) and isinstance(rule.context, CssContext)):
        raise ChildTypeError(f'Style rules must be CSS nodes; received {type(rule).__name__}: {repr_lim(rule)}')
    id = (DEFAULT_STYLE_IDS if ids is None else ids).next_id()
    _set_attr(self, 'id', id)
    _set_attr(self, 'rules', tuple(augment_css(id, rule) for rule in rule_nodes))


  def __call__(self, node:Node) -> 'Styled':
    'Apply the style to a markup node.'
    if not (isinstance(node, Node) and isinstance(node.context, MarkupContext)):
      raise ChildTypeError(f'a Style can only be applied to a markup node; received {type(node).__name__}: {repr_lim(node)}')
    return Styled(augment(self.id, node), self)


  def __setattr__(self, name:str, val:Any) -> NoReturn:
    raise ValueError(f'{type(self).__name__} is immutable; cannot set {name!r}')

  def __delattr__(self, name:str) -> NoReturn:
    raise ValueError(f'{type(self).__name__} is immutable; cannot delete {name!r}')

  def __repr__(self) -> str: return f'{type(self).__name__}(id={self.id}, rules={len(self.rules)})'

  def __str__(self) -> str:
    from .render import render
    return render(self)


def styles(style:Style) -> tuple[Node,...]:
  'The scoped rules of `style`, e.g. for placing inside a `style` element.'
  return style.rules


def augment_css(id:int, node:Node) -> Node:
  'Recursively suffix the selectors of rules that have declarations. At-rules are left unchanged.'
  tag = node.tag if (not node.attrs or is_at_rule(node.tag)) else f'{node.tag}[{scope_attr_name(id)}]'
  return Node.assemble(node.context, tag, tuple(augment_css(id, c) for c in node.children), node.attrs)


def augment(id:int, x:Any) -> Any:
  '''
  Recursively add the scope marker attribute for style `id` to markup nodes.
  `Styled` values are returned unchanged, without descending into them: they are cascade barriers.
  Non-node values and CSS nodes are returned unchanged.
  '''
  if isinstance(x, Node) and isinstance(x.context, MarkupContext):
    attrs = dict(x.attrs) # Copy; the original node is unaffected.
    attrs[scope_attr_name(id)] = None
    return Node.assemble(x.context, x.tag, tuple(augment(id, c) for c in x.children), attrs)
  return x


_styled_fields = frozenset({'node', 'style', 'context', 'tag', 'attrs', 'children'})


class Styled:
  '''
  A markup node with a `Style` applied.
  Renders exactly like the wrapped node, and acts as a cascade barrier for styles applied to enclosing nodes.
  '''

  __slots__ = ('node', 'style')

  node:Node
  style:Style

  def __init__(self, node:Node, style:Style) -> None:
    _set_attr(self, 'node', node)
    _set_attr(self, 'style', style)


  @property
  def context(self) -> MarkupContext: return self.node.context # type: ignore[return-value]

  @property
  def tag(self) -> str: return self.node.tag

  @property
  def attrs(self) -> NodeAttrs: return self.node.attrs

  @property
  def children(self) -> tuple[Any,...]: return self.node.children


  def __call__(self, *children:Any, attrs:NodeAttrs|None=None, **kw_attrs:Any) -> 'Styled':
    'Extend the wrapped node. New children are scoped by this style; attributes extend as for a plain node.'
    id = self.style.id
    scoped_children = [augment(id, c) for c in flatten(children)]
    return Styled(self.node(*scoped_children, attrs=attrs, **kw_attrs), self.style)


  def add_class(self, cl:str) -> 'Styled':
    return Styled(self.node.add_class(cl), self.style)

  def __getattr__(self, name:str) -> 'Styled':
    if name.startswith('_') or name in _styled_fields: raise AttributeError(name)
    return self.add_class(kebab_from_identifier(name))


  def __setattr__(self, name:str, val:Any) -> NoReturn:
    raise ValueError(f'{type(self).__name__} is immutable; cannot set {name!r}')

  def __delattr__(self, name:str) -> NoReturn:
    raise ValueError(f'{type(self).__name__} is immutable; cannot delete {name!r}')

  def __eq__(self, other:Any) -> bool:
    if not isinstance(other, Styled): return NotImplemented
    return self.node == other.node and self.style is other.style

  __hash__ = None # type: ignore[assignment]

  def __repr__(self) -> str: return f'{type(self).__name__}({self.node!r}, style={self.style.id})'

  def __str__(self) -> str: return self.node.render()
