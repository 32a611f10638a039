# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from operator import setitem

from hypermu import (AttrError, ChildTypeError, css, DEFAULT_CSS_CONTEXT, DEFAULT_MARKUP_CONTEXT, m, m_noescape, Node,
  NOESCAPE_MARKUP_CONTEXT, TagError)
from utest import utest, utest_exc, utest_repr, utest_val


# Construction.

utest(Node(DEFAULT_MARKUP_CONTEXT, 'p'), m, 'p')
utest(Node(DEFAULT_MARKUP_CONTEXT, 'p', ('x',), id='a'), m, 'p', 'x', id='a')
utest(Node(NOESCAPE_MARKUP_CONTEXT, 'script'), m_noescape, 'script')
utest(Node(DEFAULT_CSS_CONTEXT, 'p', color='red'), css, 'p', color='red')

utest('p', lambda: m(' p ').tag)
utest(('a', 'b', 'c'), lambda: m('p', 'a', ['b', ('c',)]).children)
utest(('0', '1', '2'), lambda: m('p', (str(i) for i in range(3))).children)
utest((None, 1), lambda: m('p', None, 1).children)
utest(('a', 'b'), lambda: m('p', filter(None, ['a', '', 'b'])).children)
utest((m('li', 'a'), m('li', 'b')), lambda: m('ul', map(lambda x: m('li', x), ['a', 'b'])).children)
utest((css('q', color='red'),), lambda: css('p', map(lambda c: css('q', color=c), ['red'])).children)

utest_exc(TagError('tag cannot be empty.'), m, '')
utest_exc(TagError('tag cannot be empty.'), m, '  ')
utest_exc(TagError, m, 'br', 'x')
utest_exc(TagError, m, 'stop', 'x')
utest_exc(TypeError, m, 5)
utest_exc(TypeError, Node, 'not a context', 'p')

# Attributes.

utest({'foo-bar': 1}, lambda: dict(m('p', fooBar=1).attrs))
utest({'class': 'c', 'http-equiv': 'refresh'}, lambda: dict(m('meta', class_='c', http_equiv='refresh').attrs))
utest({'fooBar': 1}, lambda: dict(m('p', attrs={'fooBar': 1}).attrs))
utest({'viewBox': '0 0 1 1'}, lambda: dict(m('svg', viewBox='0 0 1 1').attrs))
utest({'x1': 0, 'y2': 1}, lambda: dict(m('line', x1=0, y2=1).attrs))

# Raw attributes come first and keyword attributes win on collision.
utest({'id': 'b', 'data-x': 1}, lambda: dict(m('p', attrs={'id': 'a', 'data-x': 1}, id='b').attrs))
utest(['b', 'a'], lambda: list(m('p', b=1, a=2).attrs))

utest_exc(AttrError, m, 'p', attrs={'a b': 1})
utest_exc(AttrError, m, 'input', disabled='yes')
utest_exc(AttrError, m, 'p', x=float('nan'))
utest_exc(TypeError, m, 'p', attrs={1: 2})

# Extension.

base = m('p', 'childOne', attr='one')
utest(m('p', 'childOne', 'childTwo', attr='one'), base, 'childTwo')
utest(m('p', 'childOne', attr='two'), base, attr='two')
utest(m('p', 'childOne', 'a', 'b', attr='one', id='x'), base, ['a', ('b',)], id='x')
utest_val(('childOne',), base.children, 'extension leaves the original unchanged')
utest_val({'attr': 'one'}, dict(base.attrs), 'extension leaves the original attrs unchanged')

utest_exc(TagError, m('br'), 'x')
utest_exc(AttrError, m('input'), checked=1)
utest_exc(ChildTypeError, css('p'), 'text')

# Class sugar.

utest({'class': 'foo-bar'}, lambda: dict(m('p').fooBar.attrs))
utest({'class': 'a b'}, lambda: dict(m('p', class_='a').b.attrs))
utest({'class': 'a b c'}, lambda: dict(m('p').a.b.c.attrs))
utest({'class': 'c'}, lambda: dict(m('p', class_='a')(class_='c').attrs))
utest({'class': 'x_Y'}, lambda: dict(m('p').add_class('x_Y').attrs))
utest_exc(ChildTypeError, getattr, css('p'), 'big')
utest_exc(ChildTypeError, css('p').add_class, 'big')
utest_exc(AttributeError, getattr, m('p'), '_private')

# Immutability.

utest_exc(ValueError, setattr, m('p'), 'tag', 'q')
utest_exc(ValueError, delattr, m('p'), 'tag')
utest_exc(TypeError, setitem, m('p', id='a').attrs, 'id', 'b')
utest_exc(TypeError, hash, m('p'))

# Equality and repr.

utest_val(True, m('p', a=1, b=2) == m('p', b=2, a=1), 'attribute order does not affect equality')
utest_val(False, m('p') == css('p'), 'markup and css nodes differ')
utest_val(False, m('p') == m_noescape('p'), 'contexts differ')

utest_repr("Node<mu:p: id='x' 'hi' b>", m, 'p', 'hi', m('b'), id='x')
utest_repr("Node<css:p: color='red'>", css, 'p', color='red')

utest('<p>hi</p>', str, m('p', 'hi'))
utest('<br />', lambda: m('br').render())
