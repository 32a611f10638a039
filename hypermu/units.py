# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
CSS dimension arithmetic.

A `Unit` is a number with a suffix, e.g. `Unit(5, 'px')`, which renders as "5px".
Arithmetic on units with matching suffixes folds to a new `Unit`;
mismatched suffixes produce a `Calc`, a deferred expression that renders as "calc(...)".

The named operations `add_units`, `sub_units`, `scale_unit`, `div_unit` and `to_calc` implement the algebra;
the arithmetic operators on `Unit` and `Calc` delegate to them.
The bare unit constants allow concise construction: `5 * px`.
'''

from dataclasses import dataclass
from typing import Any


Num = int|float


@dataclass(frozen=True)
class Unit:
  val:Num
  suffix:str

  def __str__(self) -> str: return f'{self.val}{self.suffix}'

  def __add__(self, other:Any) -> 'Unit|Calc':
    return add_units(self, other) if is_dim(other) else NotImplemented

  def __sub__(self, other:Any) -> 'Unit|Calc':
    return sub_units(self, other) if is_dim(other) else NotImplemented

  def __mul__(self, other:Any) -> 'Unit':
    return scale_unit(other, self) if is_scalar(other) else NotImplemented

  __rmul__ = __mul__

  def __truediv__(self, other:Any) -> 'Unit':
    return div_unit(self, other) if is_scalar(other) else NotImplemented

  def __neg__(self) -> 'Unit': return Unit(-self.val, self.suffix)


@dataclass(frozen=True)
class Calc:
  'A deferred CSS `calc()` expression. `expr` is always parenthesized, e.g. "(1px + 2em)".'
  expr:str

  def __str__(self) -> str: return f'calc{self.expr}'

  def __add__(self, other:Any) -> 'Calc':
    return add_units(self, other) if is_dim(other) else NotImplemented

  def __sub__(self, other:Any) -> 'Calc':
    return sub_units(self, other) if is_dim(other) else NotImplemented

  def __mul__(self, other:Any) -> 'Calc':
    return scale_unit(other, self) if is_scalar(other) else NotImplemented

  __rmul__ = __mul__

  def __truediv__(self, other:Any) -> 'Calc':
    return div_unit(self, other) if is_scalar(other) else NotImplemented


@dataclass(frozen=True)
class BareUnit:
  'A suffix without a value; multiplying by a number creates a `Unit`.'
  suffix:str

  def __rmul__(self, other:Any) -> Unit:
    return Unit(other, self.suffix) if is_scalar(other) else NotImplemented

  def __str__(self) -> str: return self.suffix


def is_scalar(val:Any) -> bool:
  return isinstance(val, (int, float)) and not isinstance(val, bool)


def is_dim(val:Any) -> bool:
  return isinstance(val, (Unit, Calc))


def to_calc(x:Unit|Calc) -> Calc:
  'Convert a unit to an equivalent single-term calc expression.'
  match x:
    case Calc(): return x
    case Unit(): return Calc(f'({x})')
  raise TypeError(f'expected Unit or Calc; received {x!r}')


def add_units(a:Unit|Calc, b:Unit|Calc) -> Unit|Calc:
  return _combine(a, '+', b)


def sub_units(a:Unit|Calc, b:Unit|Calc) -> Unit|Calc:
  return _combine(a, '-', b)


def scale_unit(k:Num, x:Unit|Calc) -> Unit|Calc:
  'Multiply a unit or calc expression by a scalar.'
  if not is_scalar(k): raise TypeError(f'expected a scalar; received {k!r}')
  match x:
    case Unit(val=val, suffix=suffix): return Unit(k * val, suffix)
    case Calc(expr=expr): return Calc(f'({k} * {expr})')
  raise TypeError(f'expected Unit or Calc; received {x!r}')


def div_unit(x:Unit|Calc, k:Num) -> Unit|Calc:
  'Divide a unit or calc expression by a scalar.'
  if not is_scalar(k): raise TypeError(f'expected a scalar; received {k!r}')
  match x:
    case Unit(val=val, suffix=suffix): return Unit(val / k, suffix)
    case Calc(expr=expr): return Calc(f'({expr} / {k})')
  raise TypeError(f'expected Unit or Calc; received {x!r}')


def _combine(a:Unit|Calc, op:str, b:Unit|Calc) -> Unit|Calc:
  '''
  Fold units with matching suffixes; otherwise build a calc expression.
  Existing calc expressions are embedded as parenthesized terms rather than as nested `calc()` calls.
  '''
  match (a, b):
    case (Unit(val=av, suffix=asuf), Unit(val=bv, suffix=bsuf)) if asuf == bsuf:
      return Unit(av + bv if op == '+' else av - bv, asuf)
    case (Unit()|Calc(), Unit()|Calc()):
      return Calc(f'({_term(a)} {op} {_term(b)})')
  raise TypeError(f'unsupported operands for {op}: {a!r}, {b!r}')


def _term(x:Unit|Calc) -> str:
  return x.expr if isinstance(x, Calc) else str(x)


# Common CSS units (`ex` and `ch` excluded).
px = BareUnit('px')
pt = BareUnit('pt')
em = BareUnit('em')
rem = BareUnit('rem')
vh = BareUnit('vh')
vw = BareUnit('vw')
vmin = BareUnit('vmin')
vmax = BareUnit('vmax')
pc = BareUnit('%')
