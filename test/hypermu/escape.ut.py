# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hypermu.escape import attr_val_escapes, char_ref_table, esc, html_escapes, no_escapes
from utest import utest


utest({60: '&#60;', 62: '&#62;'}, char_ref_table, '<>')

utest('&#60;a&#62; &#38; &#39;b&#39;', esc, "<a> & 'b'", html_escapes)
utest('&#40;x&#41;&#61;&#123;&#125;', esc, '(x)={}', html_escapes)
utest('—é', esc, '—é', html_escapes)
utest('5', esc, 5, html_escapes)

# Attribute values are double-quoted, so single quotes pass through.
utest("a&#34;b'c&#10;&#9;", esc, 'a"b\'c\n\t', attr_val_escapes)

utest('<&>', esc, '<&>', no_escapes)
utest('1.5', esc, 1.5, no_escapes)
