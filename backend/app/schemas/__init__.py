from .booking import *
from .common import *
from .showtime import *
