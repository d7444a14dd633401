"""
User profile model for LINE Messaging API
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LineUser:
    """User profile model"""
    id: str
    displayName: Optional[str] = None
    pictureUrl: Optional[str] = None
    statusMessage: Optional[str] = None
    language: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: dict):
        """Create LineUser from a profile dictionary"""
        return cls(
            id=data.get('userId') or data.get('id', ''),
            displayName=data.get('displayName'),
            pictureUrl=data.get('pictureUrl'),
            statusMessage=data.get('statusMessage'),
            language=data.get('language')
        )
    
    def to_dict(self) -> dict:
        """Convert LineUser to dictionary"""
        result = {'userId': self.id}
        if self.displayName is not None:
            result['displayName'] = self.displayName
        if self.pictureUrl is not None:
            result['pictureUrl'] = self.pictureUrl
        if self.statusMessage is not None:
            result['statusMessage'] = self.statusMessage
        if self.language is not None:
            result['language'] = self.language
        return result
