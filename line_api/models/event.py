"""
Webhook event models for LINE Messaging API
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class EventSource:
    """Where an event came from (user, group or room)"""
    type: str
    userId: Optional[str] = None
    groupId: Optional[str] = None
    roomId: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: dict):
        """Create EventSource from dictionary"""
        return cls(
            type=data.get('type', 'user'),
            userId=data.get('userId'),
            groupId=data.get('groupId'),
            roomId=data.get('roomId')
        )
    
    def to_dict(self) -> dict:
        """Convert EventSource to dictionary"""
        result = {'type': self.type}
        if self.userId is not None:
            result['userId'] = self.userId
        if self.groupId is not None:
            result['groupId'] = self.groupId
        if self.roomId is not None:
            result['roomId'] = self.roomId
        return result


@dataclass
class LineEvent:
    """
    A single webhook event
    
    Only the fields the adapter reads are modeled; the untouched payload is
    kept in ``raw``.
    """
    type: str
    source: EventSource
    replyToken: Optional[str] = None
    timestamp: Optional[int] = None
    mode: Optional[str] = None
    webhookEventId: Optional[str] = None
    message: Optional[Dict[str, Any]] = None
    postback: Optional[Dict[str, Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def from_dict(cls, data: dict):
        """Create LineEvent from a webhook event dictionary"""
        return cls(
            type=data.get('type', ''),
            source=EventSource.from_dict(data.get('source', {})),
            replyToken=data.get('replyToken'),
            timestamp=data.get('timestamp'),
            mode=data.get('mode'),
            webhookEventId=data.get('webhookEventId'),
            message=data.get('message'),
            postback=data.get('postback'),
            raw=data
        )
    
    @classmethod
    def parse_webhook(cls, body: Union[str, bytes, Dict[str, Any]]) -> List["LineEvent"]:
        """
        Parse a webhook request body into events
        
        Args:
            body: Request body, either already decoded or as JSON text
            
        Returns:
            List of LineEvent in delivery order

        Raises:
            ValueError: If the body is not a JSON object
        """
        if isinstance(body, (str, bytes)):
            body = json.loads(body)
        if not isinstance(body, dict):
            raise ValueError(f"Webhook body must be a JSON object, got {type(body).__name__}")
        return [cls.from_dict(item) for item in body.get('events', [])]
    
    def to_dict(self) -> dict:
        """Convert LineEvent to dictionary"""
        result = dict(self.raw)
        result['type'] = self.type
        result['source'] = self.source.to_dict()
        if self.replyToken is not None:
            result['replyToken'] = self.replyToken
        if self.timestamp is not None:
            result['timestamp'] = self.timestamp
        if self.message is not None:
            result['message'] = self.message
        if self.postback is not None:
            result['postback'] = self.postback
        return result
    
    @property
    def reply_token(self) -> Optional[str]:
        return self.replyToken
    
    @property
    def user_id(self) -> Optional[str]:
        return self.source.userId
    
    @property
    def is_message(self) -> bool:
        return self.type == 'message'
    
    @property
    def is_text(self) -> bool:
        return self.is_message and (self.message or {}).get('type') == 'text'
    
    @property
    def text(self) -> Optional[str]:
        """Text of a text message event, None otherwise"""
        if not self.is_text:
            return None
        return self.message.get('text')
    
    @property
    def is_postback(self) -> bool:
        return self.type == 'postback'
    
    @property
    def is_follow(self) -> bool:
        return self.type == 'follow'
    
    @property
    def is_unfollow(self) -> bool:
        return self.type == 'unfollow'
