from pydantic import BaseModel

class SourceConfig(BaseModel):
    """Config for reading delimited trade files."""
    delimiter: str = ";"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    has_header: bool = True
