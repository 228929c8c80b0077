from typing import Optional

from pydantic import BaseModel


class UserInfo(BaseModel):
    name: str
    title: str
    description: str


class ContactInfo(BaseModel):
    github: str
    linkedin: str
    twitter: Optional[str] = None
    email: Optional[str] = None


class SiteInfo(BaseModel):
    title: str
    description: str
    chatUrl: str


class SiteConfig(BaseModel):
    user: UserInfo
    contact: ContactInfo
    site: SiteInfo
