# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from .assign import *
from .emptiness import *
from .optional import *
from .raw import *
