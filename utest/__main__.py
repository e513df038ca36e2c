#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, pathsep, walk
from os.path import isdir, join as path_join, relpath
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  # The scratch directory is not on the import path, so the project root is added explicitly.
  env['PYTHONPATH'] = prepend_python_path(env['UTEST_WORK_DIR'], env.get('PYTHONPATH'))

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  for path in walk_ut_files(args.paths):
    print(path)
    c = run([executable, relpath(path, utest_cwd)], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def prepend_python_path(dir:str, python_path:str|None) -> str:
  'Return a PYTHONPATH value with `dir` ahead of the existing entries, if any.'
  return pathsep.join(p for p in (dir, python_path) if p)


def walk_ut_files(paths:list[str]) -> Iterator[str]:
  'Generate the paths of `.ut.py` files in sorted order, descending into directories and skipping hidden names.'
  for path in paths:
    if not isdir(path):
      if not path.endswith('.ut.py'): raise ValueError(f'not a utest file: {path!r}')
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names[:] = sorted(n for n in dir_names if not n.startswith('.'))
      for name in sorted(file_names):
        if name.endswith('.ut.py') and not name.startswith('.'):
          yield path_join(dir_path, name)


if __name__ == '__main__': main()
