from f4cmp.Utilities import *
from f4cmp.Exceptions import *
from f4cmp.Locales import *
from f4cmp.Messages import *
from f4cmp.Comparators import *
