from pydantic import BaseModel, ConfigDict

# Hex color such as #3b82f6 or #FFF
HEX_COLOR_PATTERN = r'^#(?:[0-9a-fA-F]{3}){1,2}$'


class SchemaBase(BaseModel):
    """Base schema shared by request/response models"""

    model_config = ConfigDict(use_enum_values=True)
