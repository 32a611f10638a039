# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Render a node, styled node, or style defined in a Python module.'

from argparse import ArgumentParser
from importlib import import_module
from importlib.util import module_from_spec, spec_from_file_location
from types import ModuleType
from typing import Any

from .io import errL, outL
from .node import Node
from .render import render
from .style import Style, Styled, styles


def main() -> None:
  arg_parser = ArgumentParser(prog='hypermu', description='Render a node, styled node, or style defined in a Python module.')
  arg_parser.add_argument('target', help='MODULE:NAME, where MODULE is a module name or a path to a `.py` file. '
    'NAME may also name a callable taking no arguments that returns the value to render.')
  arg_parser.add_argument('-css', action='store_true', help='for a styled node, render its style rules instead of its markup.')
  args = arg_parser.parse_args()

  try: val = lookup(args.target)
  except (ImportError, AttributeError, ValueError) as e:
    errL(f'hypermu: {e}')
    exit(1)

  if args.css:
    if not isinstance(val, (Styled, Style)):
      errL(f'hypermu: -css requires a styled node or style; {args.target} is {type(val).__name__}.')
      exit(1)
    style = val if isinstance(val, Style) else val.style
    outL(''.join(render(rule) for rule in styles(style)))
  else:
    outL(render(val))


def lookup(target:str) -> Node|Styled|Style:
  'Resolve a MODULE:NAME target to a renderable value.'
  module_name, colon, name = target.rpartition(':')
  if not colon or not module_name or not name: raise ValueError(f'target must have the form MODULE:NAME; received {target!r}')
  module = load_module(module_name)
  try: val:Any = getattr(module, name)
  except AttributeError: raise AttributeError(f'module {module_name!r} has no attribute {name!r}') from None
  if callable(val) and not isinstance(val, (Node, Styled, Style)): val = val()
  if not isinstance(val, (Node, Styled, Style)):
    raise ValueError(f'{target} is not a node, styled node, or style: {type(val).__name__}')
  return val


def load_module(module_name:str) -> ModuleType:
  if not module_name.endswith('.py'): return import_module(module_name)
  spec = spec_from_file_location('_hypermu_target', module_name)
  if spec is None or spec.loader is None: raise ImportError(f'cannot load module from path: {module_name!r}')
  module = module_from_spec(spec)
  try: spec.loader.exec_module(module)
  except FileNotFoundError: raise ImportError(f'module file not found: {module_name!r}') from None
  return module


if __name__ == '__main__': main()
