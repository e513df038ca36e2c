# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Unwrapping helpers for optional values, i.e. `T|None`, where `None` is the absent marker.
Falsy values such as `0`, `''` and `[]` are present values.
'''

from typing import Callable, TypeVar


__all__ = [
  'if_present',
  'opt_map',
  'unwrap',
  'unwrap_or',
  'unwrap_or_else',
  'unwrap_or_raise',
]


_T = TypeVar('_T')
_R = TypeVar('_R')


def unwrap(optional:_T|None) -> _T:
  if optional is None: raise ValueError('unexpected None')
  return optional


def unwrap_or(optional:_T|None, default:_T) -> _T:
  'Return `optional` if it is not None, otherwise `default`.'
  return default if optional is None else optional


def unwrap_or_else(optional:_T|None, factory:Callable[[], _T]) -> _T:
  '''
  Return `optional` if it is not None, otherwise the result of calling `factory`.
  `factory` is only called when the value is absent.
  '''
  return factory() if optional is None else optional


def unwrap_or_raise(optional:_T|None, exc:BaseException|type[BaseException]) -> _T:
  '''
  Return `optional` if it is not None, otherwise raise `exc`.
  The exception is raised as provided by the caller, so that it can be caught by identity.
  '''
  if optional is None: raise exc
  return optional


def if_present(optional:_T|None, action:Callable[[_T], object]) -> None:
  'Call `action` once with `optional` if it is not None. The result of `action` is discarded.'
  if optional is not None:
    action(optional)


def opt_map(optional:_T|None, fn:Callable[[_T], _R]) -> _R|None:
  'Apply `fn` to `optional` if it is not None, otherwise return None.'
  if optional is None: return None
  return fn(optional)
