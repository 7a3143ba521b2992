from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from typing import Any, Dict, List, Optional, Union


CellValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr, None]


class CleanRequest(BaseModel):
    data: List[List[CellValue]]
    ai_enabled: Optional[bool] = Field(default=None, description="Defaults to the server AI_ENABLED setting")
    placeholder: Optional[str] = Field(default=None, description="Overrides the default 'N/A'")
    normalize_casing: bool = True


class CleanResponse(BaseModel):
    cleaned_data: List[List[CellValue]]
    header_row_index: int
    original_row_count: int
    cleaned_row_count: int
    summary: Optional[str] = None
    report: Optional[Dict[str, Any]] = None
