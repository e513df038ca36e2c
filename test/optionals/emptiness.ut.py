# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from optionals.emptiness import Emptyable, is_nil_or_empty, non_empty
from utest import utest, utest_val


utest(True, isinstance, '', Emptyable)
utest(True, isinstance, [], Emptyable)
utest(True, isinstance, {}, Emptyable)
utest(True, isinstance, range(0), Emptyable)
utest(False, isinstance, 0, Emptyable)
utest(False, isinstance, None, Emptyable)

utest(True, is_nil_or_empty, None)
utest(True, is_nil_or_empty, [])
utest(False, is_nil_or_empty, [1])
utest(True, is_nil_or_empty, '')
utest(False, is_nil_or_empty, 'hello World!')
utest(True, is_nil_or_empty, {})
utest(False, is_nil_or_empty, {'k': None})
utest(True, is_nil_or_empty, b'')
utest(False, is_nil_or_empty, (0,))

utest(None, non_empty, None)
utest(None, non_empty, [])
utest(None, non_empty, '')
utest([1, 2, 3], non_empty, [1, 2, 3])
utest('hello', non_empty, 'hello')

l = [1, 2, 3]
utest_val(True, non_empty(l) is l, 'non_empty returns the same object')

for x in [None, [], [1, 2, 3], '', 'a']:
  utest(non_empty(x), lambda v: non_empty(non_empty(v)), x)
