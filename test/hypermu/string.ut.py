# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hypermu.string import kebab_from_camelcase, kebab_from_identifier, RawName, repr_lim, split_camelcase
from utest import utest, utest_seq


utest_seq(['six', 'HUMP', 'Camel'], split_camelcase, 'sixHUMPCamel')
utest_seq(['data', '9'], split_camelcase, 'data9')
utest_seq(['plain'], split_camelcase, 'plain')

utest('foo-bar', kebab_from_camelcase, 'fooBar')
utest('data-9', kebab_from_camelcase, 'data9')
utest('six-hump-camel', kebab_from_camelcase, 'sixHUMPCamel')
utest('initial-caps', kebab_from_camelcase, 'InitialCaps')
utest('hump-1h-2', kebab_from_camelcase, 'hump1h2')
utest('1-hump', kebab_from_camelcase, '1Hump')
utest('squishcase', kebab_from_camelcase, 'squishcase')

# Names that are already kebab-case are unchanged.
utest('--css-var', kebab_from_camelcase, '--css-var')
utest('already-kebab', kebab_from_camelcase, 'already-kebab')
utest('7-name', kebab_from_camelcase, '7-name')

utest('class', kebab_from_identifier, 'class_')
utest('for', kebab_from_identifier, 'for_')
utest('http-equiv', kebab_from_identifier, 'http_equiv')
utest('aria-label', kebab_from_identifier, 'ariaLabel')
utest('--', kebab_from_identifier, '__')

utest("'abcd'", repr_lim, 'abcd', limit=6)
utest("'abc'…", repr_lim, 'abcdefgh', limit=6)
utest('[1, 2…', repr_lim, [1, 2, 3, 4], limit=6)

utest(True, isinstance, RawName('x'), str)
utest('x', str, RawName('x'))
