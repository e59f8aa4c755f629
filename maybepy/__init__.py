from .maybe import Maybe, Just, NOTHING, EmptyMaybeError, maybe, from_nullable
from .either import Either, Left, Right, from_maybe
from .core import Failure, attempt, attempt_async
from .logger import ConsoleLogger, get_logger, set_logger
