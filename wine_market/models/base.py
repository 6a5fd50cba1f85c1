"""Shared model configuration"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialised with camelCase keys, accepting either form on input"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
