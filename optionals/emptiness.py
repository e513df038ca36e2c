# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Protocol, runtime_checkable, TypeVar


__all__ = [
  'Emptyable',
  'is_nil_or_empty',
  'non_empty',
]


@runtime_checkable
class Emptyable(Protocol):
  '''
  A protocol for values with a notion of emptiness, i.e. a length.
  Satisfied by `str`, `bytes` and the builtin collections.
  '''
  def __len__(self) -> int: ...


_E = TypeVar('_E', bound=Emptyable)


def is_nil_or_empty(optional:Emptyable|None) -> bool:
  'Return True if `optional` is None or has zero length.'
  return optional is None or len(optional) == 0


def non_empty(optional:_E|None) -> _E|None:
  'Return `optional` unchanged if it is present and non-empty, otherwise None.'
  if optional is None or len(optional) == 0: return None
  return optional
