"""Marshalling errors.

Two kinds of failure exist:
- NilObjectError: the value being encoded (top-level or nested) is absent
- PropagatedError: a failure from a nested value, labelled with the
  structural step (struct field, slice element, map field, ptr, interface)
  that was being encoded when it happened
"""

ERR_NIL_OBJECT = "object was nil"

CTX_STRUCT_FIELD = "failed to marshal struct field"
CTX_SLICE_ELEMENT = "failed to marshal slice element"
CTX_MAP_FIELD = "failed to marshal map field"
CTX_POINTER = "failed to marshal ptr"
CTX_INTERFACE = "failed to marshal interface"


class MarshalError(Exception):
    """Base class for all marshalling failures."""


class NilObjectError(MarshalError):
    """Raised when an absent value is reached."""

    def __init__(self, message: str = ERR_NIL_OBJECT):
        super().__init__(message)


class PropagatedError(MarshalError):
    """
    A nested marshalling failure re-raised with a context label.

    The message reads "<context>: <cause>", so a chain of labels shows the
    path that led to the original failure, e.g.
    "failed to marshal ptr: failed to marshal interface: object was nil".

    Attributes:
        context: Label of the structural step that failed
        cause: The error raised by the nested step
    """

    def __init__(self, context: str, cause: MarshalError):
        super().__init__(f"{context}: {cause}")
        self.context = context
        self.cause = cause

    @property
    def root_cause(self) -> MarshalError:
        """Innermost error of the chain."""
        err: MarshalError = self
        while isinstance(err, PropagatedError):
            err = err.cause
        return err
