from typing import Optional

from pydantic import BaseModel


class TranslateRequest(BaseModel):
    # None means the field was not sent; "" is a distinct, invalid value
    text: Optional[str] = None
    locale: Optional[str] = None
