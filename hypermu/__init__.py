# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
hypermu builds, validates and renders HTML, SVG and CSS trees from Python values.

  >>> from hypermu import css, m, render
  >>> render(m('p', 'hello', class_='greeting'))
  '<p class="greeting">hello</p>'
  >>> render(css('p', css('q', color='blue')))
  'p {}p q {color: blue;}'
'''

from .context import Context, CssContext, DEFAULT_CSS_CONTEXT, DEFAULT_MARKUP_CONTEXT, MarkupContext, NOESCAPE_MARKUP_CONTEXT
from .exceptions import AttrError, ChildTypeError, InvariantViolation, MarkupError, TagError
from .iterable import flatten
from .node import css, m, m_noescape, Node
from .render import iter_render, render
from .string import RawName
from .style import augment, DEFAULT_STYLE_IDS, Style, Styled, StyleIds, styles
from .units import (add_units, BareUnit, Calc, div_unit, em, pc, pt, px, rem, scale_unit, sub_units, to_calc, Unit, vh,
  vmax, vmin, vw)
from .validator import TableValidator, Validator
