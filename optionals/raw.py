# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Equality between raw-representable values and their raw values.
A raw-representable value has a pure, total mapping to a simpler "raw" value, exposed as `raw_value`;
the typical example is an enum member and its string or integer tag.
'''

from enum import Enum
from typing import Any, Protocol, runtime_checkable, TypeVar


__all__ = [
  'HasRawValue',
  'raw_eq',
  'raw_ne',
  'raw_value_of',
  'RawValueEnum',
]


_R_co = TypeVar('_R_co', covariant=True)


@runtime_checkable
class HasRawValue(Protocol[_R_co]):
  'A protocol for values that map to a raw representation.'

  @property
  def raw_value(self) -> _R_co: ...


class RawValueEnum(Enum):
  '''
  Enum base class whose members expose their value as `raw_value`,
  and compare equal to that raw value in either argument order.
  For example, given `class Season(RawValueEnum): summer = 'summer'`,
  both `Season.summer == 'summer'` and `'summer' == Season.summer` are true.
  Members hash like their raw values so that the two forms agree as dictionary keys.
  Members of two enums are only equal if they are the same member, even when their raw values match.
  '''

  @property
  def raw_value(self) -> Any: return self._value_

  def __eq__(self, other:Any) -> bool:
    if isinstance(other, RawValueEnum): return self is other
    if isinstance(other, HasRawValue): return bool(self._value_ == other.raw_value)
    return bool(self._value_ == other)

  def __ne__(self, other:Any) -> bool: return not self.__eq__(other)

  def __hash__(self) -> int: return hash(self._value_)


def raw_value_of(val:Any) -> Any:
  'Return the raw value of `val`, or raise TypeError if it is not raw-representable.'
  if isinstance(val, HasRawValue): return val.raw_value
  raise TypeError(f'value is not raw-representable: {val!r}')


def raw_eq(a:Any, b:Any) -> bool:
  '''
  Compare a raw-representable value to a raw value, in either argument order.
  Either side may be an absent optional (None):
  an absent value never equals a present one, and two absent values are equal.
  If both sides are raw-representable, their raw values are compared,
  except that two `RawValueEnum` members are only equal if they are the same member.
  Raises TypeError if neither side is raw-representable and the two are not both None.
  '''
  a_is_rep = isinstance(a, HasRawValue)
  b_is_rep = isinstance(b, HasRawValue)
  if isinstance(a, RawValueEnum) and isinstance(b, RawValueEnum): return a is b
  if a_is_rep and b_is_rep: return bool(a.raw_value == b.raw_value)
  if a is None or b is None: return a is b
  if a_is_rep: return bool(a.raw_value == b)
  if b_is_rep: return bool(b.raw_value == a)
  raise TypeError(f'neither value is raw-representable: {a!r}, {b!r}')


def raw_ne(a:Any, b:Any) -> bool:
  'The complement of `raw_eq`.'
  return not raw_eq(a, b)
