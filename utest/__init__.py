# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
utest is a tiny unit testing library.
Each test is a single call that logs a failure to stderr rather than raising;
at process exit, a summary is printed and the process exits with status 1 if any test failed.

Set the UTEST_SHOW_EXC environment variable to a truthy value to print tracebacks for unexpected exceptions.
'''

import atexit as _atexit
import inspect as _inspect
from os import environ as _environ
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import print_exception as _print_exception
from typing import Any, Callable, TypeVar


__all__ = [
  'utest',
  'utest_call',
  'utest_exc',
  'utest_symmetric',
  'utest_val',
  'utest_val_ne',
]


_utest_test_count = 0
_utest_failure_count = 0

_show_exc = _environ.get('UTEST_SHOW_EXC', '').lower() not in ('', '0', 'false', 'no')


_C = TypeVar('_C', bound=Callable)
def utest_call(callable:_C) -> _C:
  'A function decorator to call the defined function immediately. Useful for wrapping test state in a local function scope.'
  callable()
  return callable


def utest(exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    _utest_failure(_utest_depth, exp_label='value', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    if exp != ret:
      _utest_failure(_utest_depth, exp_label='value', exp=exp, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is not raised or if the raised exception does not match `exp_exc`.
  See `_compare_exceptions` for the matching rules.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    if not _compare_exceptions(exp_exc, exc):
      _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  '''
  Log a test failure if `exp_val` does not equal `act_val`.
  Describe the test with the optional `desc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  if exp_val != act_val:
    _utest_failure(depth=0, exp_label='value', exp=exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def utest_val_ne(exp_val:Any, act_val:Any, desc='<value>') -> None:
  '''
  Log a test failure if `exp_val` equals `act_val`.
  Describe the test with the optional `desc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  if exp_val == act_val:
    _utest_failure(depth=0, exp_label='value', exp=exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def utest_symmetric(test_fn:Callable, exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Apply `test_fn` to the provided arguments,
  then again to the same arguments but with the last two positional parameters swapped.
  '''
  head = args[:-2]
  argA, argB = args[-2:]
  args_swapped = head + (argB, argA)
  test_fn(exp, fn, *args, _utest_depth=_utest_depth+1, **kwargs)
  test_fn(exp, fn, *args_swapped, _utest_depth=_utest_depth+1, **kwargs)


def _utest_failure(depth:int, exp_label:str, exp:Any, ret_label:str|None=None, ret:Any=None, exc:BaseException|None=None,
 subj:Any=None, args:tuple[Any,...]=(), kwargs:dict[str,Any]={}) -> None:

  global _utest_failure_count
  assert subj is not None
  _utest_failure_count += 1

  frame_record = _inspect.stack()[2 + depth] # Caller of caller.
  info = _inspect.getframeinfo(frame_record[0])

  try: name = subj.__qualname__
  except AttributeError: name = str(subj)

  path = _rel_path(info.filename)
  if '/' not in path: path = f'./{path}'
  _errL(f'\n{path}:{info.lineno}: utest failure: {name}')

  for i, el in enumerate(args):
    _errL(f'  arg {i} = {el!r}')
  for key, val in kwargs.items():
    _errL(f'  arg {key} = {val!r}')

  exp_label_colon = f'expected {exp_label}:'
  if exc is None: # Unexpected value.
    res_label_colon = f'returned {ret_label}:'
    res = ret
  else: # Unexpected exception.
    res_label_colon = 'raised exception:'
    res = exc
  width = max(len(exp_label_colon), len(res_label_colon))

  _errL(f'  {exp_label_colon:{width}} {exp!r}')
  _errL(f'  {res_label_colon:{width}} {res!r}')
  if exc is not None:
    for i, arg in enumerate(exc.args):
      _errL(f'    exc arg {i}: {arg!r}')
    if _show_exc:
      _errL()
      _print_exception(exc, file=_stderr)
  _errL()


def _compare_exceptions(exp:Any, act:BaseException) -> bool:
  '''
  Compare two exceptions for approximate value equality.
  Since Python exceptions do not implement value equality, we offer several methods of comparison:
  * if `exp` is a string, then compare it to the repr of `act`.
  * if `exp` is a type, then test if `act` is an instance of `exp`.
  * otherwise, compare the types and args of `act` (which must be an exception instance) to `exp`.
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
