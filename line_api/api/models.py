"""
API response models for LINE Messaging API
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class APIResponse:
    """Result of a Messaging API call"""
    data: Any = None
    status: Optional[int] = None
    request_id: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    
    @property
    def success(self) -> bool:
        return self.status is not None and 200 <= self.status < 300
    
    @classmethod
    def from_response(cls, response):
        """Create APIResponse from requests.Response"""
        try:
            data = response.json() if response.content else {}
        except ValueError:
            # Non-JSON bodies are kept as text
            data = response.text
        return cls(
            data=data,
            status=response.status_code,
            request_id=response.headers.get('X-Line-Request-Id'),
            headers=dict(response.headers)
        )
    
    def to_dict(self) -> dict:
        """Convert APIResponse to dictionary"""
        result = {}
        if self.data is not None:
            result['data'] = self.data
        if self.status is not None:
            result['status'] = self.status
        if self.request_id is not None:
            result['request_id'] = self.request_id
        return result
