# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Assign-if-absent helpers.
A slot is absent when it holds None, or when a mapping key or object attribute does not exist at all.
'''

from typing import Any, Generic, Hashable, MutableMapping, TypeVar


__all__ = [
  'coalesce_assign',
  'conditional_assign',
  'conditional_setattr',
  'Ref',
]


_T = TypeVar('_T')
_K = TypeVar('_K', bound=Hashable)
_V = TypeVar('_V')


class Ref(Generic[_T]):
  '''
  A mutable cell holding an optional value.
  Python has no references to variables; a `Ref` can be passed where a callee needs to rebind an optional.
  '''

  __slots__ = ('val',)

  def __init__(self, val:_T|None=None) -> None:
    self.val = val

  def __repr__(self) -> str: return f'{type(self).__name__}({self.val!r})'

  def __eq__(self, other:Any) -> bool:
    if not isinstance(other, Ref): return NotImplemented
    return bool(self.val == other.val)

  __hash__ = None # type: ignore[assignment] # Mutable.


def coalesce_assign(d:MutableMapping[_K,_V|None], key:_K, value:_V|None) -> None:
  '''
  Store `value` under `key` if the key is missing or bound to None; otherwise do nothing.
  The assignment happens even when `value` is None:
  a missing key then becomes present and bound to None, which `key in d` can observe but `d.get(key)` cannot.
  '''
  if d.get(key) is None:
    d[key] = value


def conditional_assign(ref:Ref[_T], value:_T|None) -> None:
  'Set `ref.val` to `value` if it is currently None; otherwise leave it unchanged.'
  if ref.val is None:
    ref.val = value


def conditional_setattr(obj:Any, name:str, value:Any) -> None:
  'Set attribute `name` of `obj` to `value` if the attribute is missing or None; otherwise leave it unchanged.'
  if getattr(obj, name, None) is None:
    setattr(obj, name, value)
