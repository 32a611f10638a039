# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hypermu import TableValidator, Validator
from utest import utest


v = TableValidator(['p', 'a'], {'a': ['href', 'target']}, global_attrs=['id', 'class'])

utest(True, v.is_valid_tag, 'p')
utest(False, v.is_valid_tag, 'blink')

utest(True, v.is_valid_attr, 'a', 'href')
utest(False, v.is_valid_attr, 'p', 'href')
utest(True, v.is_valid_attr, 'p', 'class')
utest(True, v.is_valid_attr, 'p', 'data-anything')
utest(True, v.is_valid_attr, 'blink', 'aria-hidden')
utest(False, v.is_valid_attr, 'blink', 'style')

utest(True, TableValidator(['p']).is_valid_attr, 'p', 'data-x')
utest(False, TableValidator(['p']).is_valid_attr, 'p', 'title')

utest('TableValidator(<2 tags>)', repr, v)


def check_protocol(validator:Validator) -> bool:
  return validator.is_valid_tag('p')

utest(True, check_protocol, v)
