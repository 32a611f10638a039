# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hypermu import (css, DEFAULT_CSS_CONTEXT, DEFAULT_MARKUP_CONTEXT, InvariantViolation, iter_render, m, m_noescape, Node, px,
  render, Style, StyleIds)
from hypermu.render import fmt_attr_val, render_node
from utest import utest, utest_exc, utest_seq


utest('<p></p>', render, m('p'))
utest('<br />', render, m('br'))
utest('<p>&#60;</p>', render, m('p', '<'))
utest('<p>—</p>', render, m('p', '—'))
utest('<p>Hi&#33;</p>', render, m('p', 'Hi!'))
utest('<p>12</p>', render, m('p', 1, 2))
utest('<p>x</p>', render, m('p', None, 'x'))
utest('<p>4px</p>', render, m('p', 4*px))
utest('<p>range&#40;1, 3&#41;</p>', render, m('p', range(1, 3)))
utest('<div><p><b>x</b></p></div>', render, m('div', m('p', m('b', 'x'))))
utest('<ul><li>a</li><li>b</li></ul>', render, m('ul', map(lambda x: m('li', x), ['a', 'b'])))

# Class sugar and extension.

utest('<p class="foo-bar"></p>', render, m('p').fooBar)
utest('<p class="a b"></p>', render, m('p', class_='a').b)
utest('<p attr="one">childOnechildTwo</p>', render, m('p', 'childOne', attr='one')('childTwo'))
utest('<p attr="two">childOne</p>', render, m('p', 'childOne', attr='one')(attr='two'))

# Attributes render in insertion order.

utest('<p b="1" a="2"></p>', render, m('p', b=1, a=2))
utest('<p title="a&#34;b&#10;"></p>', render, m('p', title='a"b\n'))
utest('<p title="it\'s"></p>', render, m('p', title="it's"))
utest('<p draggable="true" translate="false"></p>', render, m('p', draggable=True, translate=False))
utest('<p data-x></p>', render, m('p', data_x=None))
utest('<a href="/x?a=1&#38;b=2">x</a>', render, m('a', 'x', href='/x?a=1&b=2'))

# Boolean attributes are valueless when true and omitted when false.
utest('<input disabled />', render, m('input', disabled=True))
utest('<input />', render, m('input', disabled=False))
utest('<input type="checkbox" checked required />', render, m('input', type='checkbox', checked=True, required=True))

# SVG.

utest('<svg viewBox="0 0 2 2"><circle r="1" /><line x1="0" x2="2" /></svg>',
  render, m('svg', m('circle', r=1), m('line', x1=0, x2=2), viewBox='0 0 2 2'))

# No-escape applies to direct text children only.

utest('<script>a < b && c</script>', render, m_noescape('script', 'a < b && c'))
utest('<div><<p>&#60;</p></div>', render, m_noescape('div', '<', m('p', '<')))
utest('<p><script>&</script></p>', render, m('p', m_noescape('script', '&')))

# A CSS node inside markup renders in its own context.

utest('<style>q {color: blue;}</style>', render, m('style', css('q', color='blue')))

# Fragments.

utest_seq(['<', 'p', ' ', 'id', '="', 'a', '"', '>', 'x', '</', 'p', '>'], iter_render, m('p', 'x', id='a'))

utest('true', fmt_attr_val, True)
utest('false', fmt_attr_val, False)
utest('1.5', fmt_attr_val, 1.5)

# Errors.

utest_exc(InvariantViolation, lambda: ''.join(render_node(m('p'), DEFAULT_CSS_CONTEXT)))
utest_exc(InvariantViolation, render, Node.assemble(DEFAULT_MARKUP_CONTEXT, 'br', ('x',), {}))
utest_exc(TypeError, render, 'p')

# A Style child renders its rules unescaped.

utest('<style>p[v-style4] {color: red;}q {}</style>',
  render, m('style', Style(css('p', color='red'), css('q'), ids=StyleIds(4))))
