"""Strongly typed identifiers for Mindful domain entities.

User identifiers are opaque strings issued by the identity provider. Every
other entity uses the integer key assigned by the database.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
TagId = NewType("TagId", int)
DoctorId = NewType("DoctorId", int)
DoctorConnectionId = NewType("DoctorConnectionId", int)
ChatMessageId = NewType("ChatMessageId", int)
