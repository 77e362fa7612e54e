"""Member writers.

One writer per member kind renders that kind's summary and details.

Available Writers:
- PropertyWriter: properties (accessor methods named by convention)

Shared behavior is in MemberWriterHelpers; the contracts every writer
implements are MemberSummaryWriter and PropertyDetailWriter.

"""

from memberdoc.writers.common import MemberSignature, MemberWriterHelpers
from memberdoc.writers.property import PropertyWriter
from memberdoc.writers.protocol import MemberSummaryWriter, PropertyDetailWriter

__all__ = [
    "MemberSignature",
    "MemberSummaryWriter",
    "MemberWriterHelpers",
    "PropertyDetailWriter",
    "PropertyWriter",
]
