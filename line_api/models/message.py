"""
Message models for LINE Messaging API

Each model renders the camelCase payload the Messaging API expects.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class TextMessage:
    """Plain text message"""
    text: str
    
    def to_dict(self) -> dict:
        return {"type": "text", "text": self.text}


@dataclass
class ImageMessage:
    """Image message"""
    originalContentUrl: str
    previewImageUrl: Optional[str] = None
    
    def to_dict(self) -> dict:
        return {
            "type": "image",
            "originalContentUrl": self.originalContentUrl,
            # LINE requires a preview; the full image works as one
            "previewImageUrl": self.previewImageUrl or self.originalContentUrl
        }


@dataclass
class VideoMessage:
    """Video message"""
    originalContentUrl: str
    previewImageUrl: str
    
    def to_dict(self) -> dict:
        return {
            "type": "video",
            "originalContentUrl": self.originalContentUrl,
            "previewImageUrl": self.previewImageUrl
        }


@dataclass
class AudioMessage:
    """Audio message, duration in milliseconds"""
    originalContentUrl: str
    duration: int
    
    def to_dict(self) -> dict:
        return {
            "type": "audio",
            "originalContentUrl": self.originalContentUrl,
            "duration": self.duration
        }


@dataclass
class LocationMessage:
    """Location message"""
    title: str
    address: str
    latitude: float
    longitude: float
    
    def to_dict(self) -> dict:
        return {
            "type": "location",
            "title": self.title,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude
        }


@dataclass
class StickerMessage:
    """Sticker message"""
    packageId: str
    stickerId: str
    
    def to_dict(self) -> dict:
        return {
            "type": "sticker",
            "packageId": str(self.packageId),
            "stickerId": str(self.stickerId)
        }


@dataclass
class ImagemapMessage:
    """Imagemap message"""
    baseUrl: str
    altText: str
    baseWidth: int
    baseHeight: int
    actions: List[Dict[str, Any]] = field(default_factory=list)
    
    def to_dict(self) -> dict:
        return {
            "type": "imagemap",
            "baseUrl": self.baseUrl,
            "altText": self.altText,
            "baseSize": {
                "width": self.baseWidth,
                "height": self.baseHeight
            },
            "actions": self.actions
        }


@dataclass
class ButtonsTemplate:
    """Buttons template body"""
    text: str
    actions: List[Dict[str, Any]]
    title: Optional[str] = None
    thumbnailImageUrl: Optional[str] = None
    
    def to_dict(self) -> dict:
        result = {"type": "buttons"}
        if self.thumbnailImageUrl is not None:
            result["thumbnailImageUrl"] = self.thumbnailImageUrl
        if self.title is not None:
            result["title"] = self.title
        result["text"] = self.text
        result["actions"] = self.actions
        return result


@dataclass
class ConfirmTemplate:
    """Confirm template body (exactly two actions)"""
    text: str
    actions: List[Dict[str, Any]]
    
    def to_dict(self) -> dict:
        return {"type": "confirm", "text": self.text, "actions": self.actions}


@dataclass
class CarouselTemplate:
    """Carousel template body"""
    columns: List[Dict[str, Any]]
    
    def to_dict(self) -> dict:
        return {"type": "carousel", "columns": self.columns}


@dataclass
class ImageCarouselTemplate:
    """Image carousel template body"""
    columns: List[Dict[str, Any]]
    
    def to_dict(self) -> dict:
        return {"type": "image_carousel", "columns": self.columns}


@dataclass
class TemplateMessage:
    """Template message wrapping one of the template bodies"""
    altText: str
    template: Any
    
    def to_dict(self) -> dict:
        template = self.template.to_dict() if hasattr(self.template, "to_dict") else self.template
        return {"type": "template", "altText": self.altText, "template": template}
