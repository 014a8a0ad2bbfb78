## easyflag — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Kind, KINDS, Slot, Bool, I8, I16, I32, I64, I128, Isize, U8, U16, U32, U64, U128, Usize, F32, F64, String
from .errors import *
from .binding import Binding
from .flagset import Flag, FlagSet
from .formatting import unquote_usage
