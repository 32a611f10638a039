'''
utest is a tiny unit testing library.

Each check runs immediately and records a failure report on stderr instead of raising.
At process exit, if any check failed, a summary is printed and the process exits with status 1.
'''


import atexit as _atexit
import inspect as _inspect
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import print_exception as _print_exception
from typing import Any, Callable, Iterable


__all__ = [
  'utest',
  'utest_exc',
  'utest_repr',
  'utest_seq',
  'utest_val',
]


_utest_test_count = 0
_utest_failure_count = 0


def utest(exp:Any, fn:Callable, *args:Any, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  _count()
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    _utest_failure(exp_label='value', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    if exp != ret:
      _utest_failure(exp_label='value', exp=exp, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_repr(exp_repr:str, fn:Callable, *args:Any, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value's `repr` does not equal `exp_repr`.
  '''
  _count()
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    _utest_failure(exp_label='repr', exp=exp_repr, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    if exp_repr != repr(ret):
      _utest_failure(exp_label='repr', exp=exp_repr, ret_label='repr', ret=repr(ret), subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is not raised or if the raised exception does not match `exp_exc`.
  See `_compare_exceptions` for the matching rules.
  '''
  _count()
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    if not _compare_exceptions(exp_exc, exc):
      _utest_failure(exp_label='exception', exp=exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    _utest_failure(exp_label='exception', exp=exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_seq(exp_seq:Iterable[Any], fn:Callable, *args:Any, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`, and convert the resulting iterable into a list.
  Log a test failure if an exception is raised, or if the items do not equal the items of `exp_seq`.
  '''
  _count()
  exp = list(exp_seq)
  try: ret = list(fn(*args, **kwargs))
  except Exception as exc:
    _utest_failure(exp_label='sequence', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    if exp != ret:
      _utest_failure(exp_label='sequence', exp=exp, ret_label='sequence', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  'Log a test failure if `exp_val` does not equal `act_val`, described by `desc`.'
  _count()
  if exp_val != act_val:
    _utest_failure(exp_label='value', exp=exp_val, ret_label='value', ret=act_val, subj=desc)


def _count() -> None:
  global _utest_test_count
  _utest_test_count += 1


def _utest_failure(exp_label:str, exp:Any, ret_label:str|None=None, ret:Any=None, exc:Exception|None=None, subj:Any=None,
 args:tuple[Any,...]=(), kwargs:dict[str,Any]={}) -> None:

  global _utest_failure_count
  _utest_failure_count += 1

  info = _inspect.getframeinfo(_inspect.stack()[2][0]) # Caller of the utest function.
  name = getattr(subj, '__qualname__', None) or repr(subj)
  path = _rel_path(info.filename)
  if '/' not in path: path = f'./{path}'
  _errL(f'\n{path}:{info.lineno}: utest failure: {name}')

  for i, el in enumerate(args):
    _errL(f'  arg {i} = {el!r}')
  for k, v in kwargs.items():
    _errL(f'  arg {k} = {v!r}')

  exp_label_colon = f'expected {exp_label}:'
  if exc is None:
    res_label_colon = f'returned {ret_label}:'
    res:Any = ret
  else:
    res_label_colon = 'raised exception:'
    res = exc
  width = max(len(exp_label_colon), len(res_label_colon))
  _errL(f'  {exp_label_colon:{width}} {exp!r}')
  _errL(f'  {res_label_colon:{width}} {res!r}')
  if exc is not None:
    _errL()
    _print_exception(exc, file=_stderr)
  _errL()


def _compare_exceptions(exp:Any, act:Exception) -> bool:
  '''
  Compare two exceptions for approximate value equality.
  Since Python exceptions do not implement value equality, we offer several methods of comparison:
  * if `exp` is a string, then compare it to the repr of `act`.
  * if `exp` is a type, then test if `act` is an instance of `exp`.
  * otherwise, compare the types and args of `act` to `exp`.
  '''
  if isinstance(exp, str): return exp == repr(act)
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _errL(*items:Any) -> None: print(*items, sep='', file=_stderr)


@_atexit.register
def report() -> None:
  'At process exit, if any test failures occured, print a summary message and force process to exit with status code 1.'
  from os import _exit
  if _utest_failure_count > 0:
    _errL(f'\nutest ran: {_utest_test_count}; failed: {_utest_failure_count}')
    _stderr.flush()
    _exit(1) # Raising SystemExit has no effect in an atexit handler.
