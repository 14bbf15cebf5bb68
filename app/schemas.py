from typing import Optional

from pydantic import BaseModel, Field


class JobOut(BaseModel):
    id: int
    title: str
    department: str
    category: str
    location: Optional[str] = None
    qualification: Optional[str] = None
    posts: Optional[int] = None
    last_date: Optional[str] = None
    application_link: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ResultOut(BaseModel):
    id: int
    title: str
    exam_name: str
    result_link: Optional[str] = None
    published_date: Optional[str] = None
    created_at: Optional[str] = None


class AdmitCardOut(BaseModel):
    id: int
    title: str
    exam_name: str
    download_link: Optional[str] = None
    exam_date: Optional[str] = None
    created_at: Optional[str] = None


class AnswerKeyOut(BaseModel):
    id: int
    title: str
    exam_name: str
    download_link: Optional[str] = None
    published_date: Optional[str] = None
    created_at: Optional[str] = None


class CountOut(BaseModel):
    count: int


class PushKeys(BaseModel):
    p256dh: Optional[str] = None
    auth: Optional[str] = None


class PushSubscriptionIn(BaseModel):
    endpoint: str = Field(..., min_length=1, max_length=2048)
    expirationTime: Optional[int] = None
    keys: PushKeys = Field(default_factory=PushKeys)
