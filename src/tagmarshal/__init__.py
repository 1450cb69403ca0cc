"""tagmarshal - tag-directed structural serializer."""

__version__ = "0.1.0"

from .encoder import Encoder
from .errors import MarshalError, NilObjectError, PropagatedError
from .kinds import Interface, Kind, Pointer
from .tags import tagged

__all__ = [
    "Encoder",
    "Interface",
    "Kind",
    "MarshalError",
    "NilObjectError",
    "Pointer",
    "PropagatedError",
    "tagged",
    "__version__",
]
