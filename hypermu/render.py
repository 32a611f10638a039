# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Rendering of node trees to text.

A node always renders in its own context; the parent's context only governs the escaping of non-node children.
Markup renders as tag syntax.
CSS renders as a sequence of rules: at-rules (e.g. "@media ...") nest their child rules inside their own block,
while ordinary selectors are flattened, so that each child rule becomes a separate top-level rule with a descendant selector.
'''

from typing import Any, Iterator

from .context import Context, CssContext, is_at_rule, MarkupContext
from .escape import esc
from .exceptions import InvariantViolation
from .node import Node
from .semantics import boolean_attrs
from .style import Style, Styled


Renderable = Node|Styled|Style


def render(x:Renderable) -> str:
  'Render a node, styled node, or style into a single string.'
  return ''.join(iter_render(x))


def iter_render(x:Renderable) -> Iterator[str]:
  'Render a node, styled node, or style as a stream of text fragments.'
  match x:
    case Node(): yield from render_node(x, x.context)
    case Styled(): yield from render_node(x.node, x.node.context)
    case Style():
      for rule in x.rules: yield from render_node(rule, rule.context)
    case _: raise TypeError(f'cannot render value of type {type(x).__name__}: {x!r}')


def render_node(node:Node, ctx:Context) -> Iterator[str]:
  'Render `node` in `ctx`, which must be the node\'s own context.'
  if ctx != node.context:
    raise InvariantViolation(f'node context does not match render context: {node!r}; node: {node.context}; render: {ctx}')
  match ctx:
    case MarkupContext(): yield from _render_markup(ctx, node)
    case CssContext(): yield from _render_css(ctx, node)


def fmt_attr_val(val:Any) -> str:
  if val is True: return 'true'
  if val is False: return 'false'
  return str(val)


def _render_markup(ctx:MarkupContext, node:Node) -> Iterator[str]:
  etag = ctx.tag_escapes
  eattrname = ctx.attr_name_escapes
  eattrval = ctx.attr_val_escapes

  yield '<'
  yield esc(node.tag, etag)
  for name, val in node.attrs.items():
    is_bool_attr = name in boolean_attrs
    if is_bool_attr and val is False: continue # Omitted entirely.
    yield ' '
    yield esc(name, eattrname)
    if val is None or (is_bool_attr and val is True): continue # Valueless.
    yield '="'
    yield esc(fmt_attr_val(val), eattrval)
    yield '"'

  if ctx.is_void(node.tag):
    if node.children: raise InvariantViolation(f'void node has children: {node!r}')
    yield ' />'
    return

  yield '>'
  echild = ctx.child_escapes
  for child in node.children:
    match child:
      case None: pass
      case Node(): yield from render_node(child, child.context)
      case Styled(): yield from render_node(child.node, child.node.context)
      case Style(): yield from iter_render(child)
      case _: yield esc(child, echild)
  yield '</'
  yield esc(node.tag, etag)
  yield '>'


def _render_css(ctx:CssContext, node:Node) -> Iterator[str]:
  etag = ctx.tag_escapes
  eattrname = ctx.attr_name_escapes
  eattrval = ctx.attr_val_escapes

  yield esc(node.tag, etag)
  yield ' {'
  for name, val in node.attrs.items():
    yield esc(name, eattrname)
    yield ': '
    yield esc(fmt_attr_val(val), eattrval)
    yield ';'

  nest = is_at_rule(node.tag)
  if nest:
    for child in node.children:
      yield from render_node(child, child.context)
  yield '}'

  if not nest:
    for child in node.children:
      # Flatten into a descendant selector, e.g. "p" containing "q" renders as "p {...}" followed by "p q {...}".
      desc = Node.assemble(child.context, f'{node.tag} {child.tag}', child.children, child.attrs)
      yield from render_node(desc, desc.context)
