# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os import pathsep

from utest import utest, utest_exc, utest_symmetric, utest_val, utest_val_ne
from utest.__main__ import prepend_python_path


def exit_3() -> None: raise SystemExit(3)

def interrupt() -> None: raise KeyboardInterrupt


# Exceptions outside of `Exception` are caught and matched too.
utest_exc(SystemExit, exit_3)
utest_exc(SystemExit(3), exit_3)
utest_exc(KeyboardInterrupt, interrupt)

utest(True, lambda: True)
utest_val((0, 1), (0, 1), 'tuple test')
utest_val_ne(0, 1, 'int test')
utest_symmetric(utest, 1, min, 1, 2)

utest('root', prepend_python_path, 'root', None)
utest('root', prepend_python_path, 'root', '')
utest(f'root{pathsep}lib', prepend_python_path, 'root', 'lib')
