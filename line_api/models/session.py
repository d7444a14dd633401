"""
Session model for LINE conversations
"""

from dataclasses import dataclass
from typing import Optional

from .event import EventSource, LineEvent
from .user import LineUser


@dataclass
class LineSession:
    """Durable identity of the user a conversation is held with"""
    user: LineUser
    source: EventSource
    
    @classmethod
    def from_event(cls, event: LineEvent, profile: Optional[LineUser] = None) -> Optional["LineSession"]:
        """
        Build a session for the sender of an event
        
        Args:
            event: Incoming webhook event
            profile: Already fetched profile of the sender, if any
            
        Returns:
            LineSession, or None when the event carries no user id
            (e.g. group events from users without a linked account)
        """
        user_id = event.user_id
        if not user_id:
            return None
        user = profile if profile is not None else LineUser(id=user_id)
        return cls(user=user, source=event.source)
    
    def to_dict(self) -> dict:
        """Convert LineSession to dictionary"""
        return {
            'user': self.user.to_dict(),
            'source': self.source.to_dict()
        }
