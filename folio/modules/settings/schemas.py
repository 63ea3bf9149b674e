from typing import Literal, Optional

from pydantic import model_validator

from .models import decode_value
from ...core.validation import ApiSchema, NonEmptyStr

SettingType = Literal['text', 'number', 'boolean', 'json']


class SiteSettingCreate(ApiSchema):
    key: NonEmptyStr
    value: NonEmptyStr
    type: SettingType = 'text'
    description: Optional[str] = None
    category: NonEmptyStr = 'general'
    public: bool = False

    @model_validator(mode='after')
    def check_value_matches_type(self):
        try:
            decode_value(self.value, self.type)
        except ValueError as e:
            raise ValueError(f'value does not match type {self.type}: {e}')
        return self


class SiteSettingUpdate(ApiSchema):
    value: NonEmptyStr = None
    type: SettingType = None
    description: Optional[str] = None
    category: NonEmptyStr = None
    public: bool = None
