# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Escape tables and escaping functions.
Each table maps code points to replacement strings, in the form accepted by `str.translate`.
Markup escapes use numeric character references; non-ASCII text passes through untouched (UTF-8 output is assumed).
'''

from typing import Any


EscapeTable = dict[int,str]


def char_ref_table(chars:str) -> EscapeTable:
  'Create a table that replaces each character in `chars` with its decimal numeric character reference.'
  return { ord(c): f'&#{ord(c)};' for c in chars }


# Tag names, attribute names and child text.
# See: https://stackoverflow.com/a/9189067.
html_escapes = char_ref_table('&<>"\'`!@$%()=+{}[]')

# Attribute values, which are always rendered inside double quotes.
# See: https://stackoverflow.com/questions/7753448/how-do-i-escape-quotes-in-html-attribute-values.
attr_val_escapes = char_ref_table('&<>"\n\r\t')

no_escapes:EscapeTable = {}


def esc(val:Any, table:EscapeTable) -> str:
  'Convert `val` to a string and apply the escape `table`.'
  s = val if isinstance(val, str) else str(val)
  return s.translate(table) if table else s
