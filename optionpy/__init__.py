from .errors import EmptyValueAccess
from .option import (
    Option,
    Present,
    Absent,
    ABSENT,
    present,
    absent,
    from_nullable,
    to_nullable,
    flatten,
)
from .logger import ConsoleLogger, log_inspect
